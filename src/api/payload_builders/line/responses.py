"""Helpers para montar CommandResponse com mensagens LINE.

As variantes `*_with_next` anexam um UserContext: a próxima mensagem do
mesmo remetente vai para `next_func` em vez do despacho normal de comandos.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from app.protocols.bot import CommandResponse, UserContext

from .text import TextMessage

if TYPE_CHECKING:
    from app.protocols.bot import ContextualFunc
    from app.protocols.payload_builder import SendingMessageProtocol


def new_string_response(response_content: str) -> CommandResponse:
    """Resposta com uma única mensagem de texto."""
    return CommandResponse(content=TextMessage(response_content), user_context=None)


def new_string_response_with_next(
    response_content: str,
    next_func: ContextualFunc,
) -> CommandResponse:
    """Resposta de texto que mantém o usuário no contexto de `next_func`."""
    return new_customized_response_with_next(TextMessage(response_content), next_func)


def new_customized_response(response_message: SendingMessageProtocol) -> CommandResponse:
    """Resposta com qualquer mensagem LINE (sticker, imagem, localização...)."""
    return CommandResponse(content=response_message, user_context=None)


def new_customized_response_with_next(
    response_message: SendingMessageProtocol,
    next_func: ContextualFunc,
) -> CommandResponse:
    return CommandResponse(content=response_message, user_context=UserContext(next_func))


def new_multiple_customized_responses(
    response_messages: Sequence[SendingMessageProtocol],
) -> CommandResponse:
    """Resposta com várias mensagens, enviadas numa única chamada de reply."""
    return CommandResponse(content=list(response_messages), user_context=None)


def new_multiple_customized_responses_with_next(
    response_messages: Sequence[SendingMessageProtocol],
    next_func: ContextualFunc,
) -> CommandResponse:
    return CommandResponse(content=list(response_messages), user_context=UserContext(next_func))
