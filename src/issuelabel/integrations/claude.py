"""Claude integration through langchain-anthropic."""

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage

# The answer is a short comma-separated list
DEFAULT_MAX_TOKENS = 256


def response_text(content) -> str:
    """Concatenate the text parts of a chat model response."""
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ClaudeLabelModel:
    """Language model collaborator answering label prompts."""

    def __init__(self, model: str, max_tokens: int = DEFAULT_MAX_TOKENS):
        self.model = model
        self._llm = ChatAnthropic(model=model, max_tokens=max_tokens)

    def complete(self, prompt: str) -> str:
        response = self._llm.invoke([HumanMessage(content=prompt)])
        return response_text(response.content)
