"""Tests for the Claude language model adapter."""

from unittest.mock import patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from issuelabel.integrations.claude import DEFAULT_MAX_TOKENS, ClaudeLabelModel, response_text


class TestResponseText:
    """Tests for response_text function."""

    def test_plain_string(self):
        assert response_text("bug, ui") == "bug, ui"

    def test_text_blocks_concatenated(self):
        content = [
            {"type": "text", "text": "bug, "},
            {"type": "tool_use", "id": "x", "name": "t", "input": {}},
            {"type": "text", "text": "ui"},
        ]
        assert response_text(content) == "bug, ui"

    def test_string_blocks(self):
        assert response_text(["bug", ", ui"]) == "bug, ui"

    def test_empty(self):
        assert response_text([]) == ""


class TestClaudeLabelModel:
    """Tests for ClaudeLabelModel."""

    def test_complete_sends_single_human_message(self):
        with patch("issuelabel.integrations.claude.ChatAnthropic") as chat_cls:
            chat_cls.return_value.invoke.return_value = AIMessage(content="bug")

            model = ClaudeLabelModel("claude-haiku-4-5")
            answer = model.complete("prompt text")

        chat_cls.assert_called_once_with(model="claude-haiku-4-5", max_tokens=DEFAULT_MAX_TOKENS)
        (messages,), _ = chat_cls.return_value.invoke.call_args
        assert messages == [HumanMessage(content="prompt text")]
        assert answer == "bug"

    def test_errors_propagate(self):
        with patch("issuelabel.integrations.claude.ChatAnthropic") as chat_cls:
            chat_cls.return_value.invoke.side_effect = ConnectionError("offline")
            model = ClaudeLabelModel("claude-haiku-4-5")

            with pytest.raises(ConnectionError, match="offline"):
                model.complete("prompt")
