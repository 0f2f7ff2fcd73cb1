"""Opal FastAPI Server"""
from .client import OpalClient

__all__ = ['OpalClient']
