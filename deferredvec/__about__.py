"""deferredvec"""
__version__ = "1.0.0"
__author__ = "Afonso Miguel"
__author_email__ = "afonso.miguel@pucpr.br"
