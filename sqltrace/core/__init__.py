from sqltrace.core.assembler import assemble_query

__all__ = ("assemble_query",)
