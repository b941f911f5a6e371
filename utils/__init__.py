"""工具模块"""
from .text import join_arguments, remove_whitespace

__all__ = ['join_arguments', 'remove_whitespace']
