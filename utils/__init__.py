"""工具模块"""
from .formatting import format_result, format_menu

__all__ = ['format_result', 'format_menu']
