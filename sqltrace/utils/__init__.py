from sqltrace.utils import logging

__all__ = ("logging",)
