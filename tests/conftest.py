"""Shared fixtures: a recording stub in place of the OpenAI gateway."""

import pytest

from schemas import ImagePayload


class StubGateway:
    """Returns queued replies in order; an Exception in the queue is raised instead."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, model, system_prompt, image, user_prompt, temperature=None, response_format=None):
        self.calls.append({
            "model": model,
            "system_prompt": system_prompt,
            "image": image,
            "user_prompt": user_prompt,
            "temperature": temperature,
            "response_format": response_format,
        })
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def image():
    return ImagePayload(data=b"\xff\xd8\xff\xe0fake-jpeg", content_type="image/jpeg")


@pytest.fixture
def stub_gateway():
    return StubGateway
