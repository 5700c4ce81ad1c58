"""Rotas HTTP do canal LINE."""

from .webhook import OnEvents, create_line_router, dump_request

__all__ = ["OnEvents", "create_line_router", "dump_request"]
