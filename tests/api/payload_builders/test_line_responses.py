"""Testes para os helpers de CommandResponse."""

from __future__ import annotations

from api.payload_builders.line import (
    StickerMessage,
    TextMessage,
    new_customized_response,
    new_customized_response_with_next,
    new_multiple_customized_responses,
    new_multiple_customized_responses_with_next,
    new_string_response,
    new_string_response_with_next,
)
from app.protocols.bot import CommandResponse, Input


async def _next(input_: Input) -> CommandResponse:
    return new_string_response("ok")


def test_new_string_response() -> None:
    response = new_string_response("hello")

    assert response.content == TextMessage("hello")
    assert response.user_context is None


def test_new_string_response_with_next() -> None:
    response = new_string_response_with_next("qual sua idade?", _next)

    assert response.content == TextMessage("qual sua idade?")
    assert response.user_context is not None
    assert response.user_context.next_func is _next


def test_new_customized_response() -> None:
    sticker = StickerMessage("446", "1988")

    response = new_customized_response(sticker)

    assert response.content is sticker
    assert response.user_context is None


def test_new_customized_response_with_next() -> None:
    response = new_customized_response_with_next(StickerMessage("446", "1988"), _next)

    assert response.user_context is not None
    assert response.user_context.next_func is _next


def test_new_multiple_customized_responses_copies_sequence() -> None:
    messages = (TextMessage("a"), TextMessage("b"))

    response = new_multiple_customized_responses(messages)

    assert response.content == [TextMessage("a"), TextMessage("b")]
    assert response.user_context is None


def test_new_multiple_customized_responses_with_next() -> None:
    response = new_multiple_customized_responses_with_next([TextMessage("a")], _next)

    assert response.content == [TextMessage("a")]
    assert response.user_context is not None
    assert response.user_context.next_func is _next
