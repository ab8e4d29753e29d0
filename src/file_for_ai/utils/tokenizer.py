# src/file_for_ai/utils/tokenizer.py
import tiktoken

from file_for_ai.errors import TokenizerError


class Tokenizer:
    """Counts tokens for a model through its tiktoken encoding."""

    def __init__(self, model: str, encoding):
        self.model = model
        self._encoding = encoding

    @classmethod
    def for_model(cls, model: str) -> "Tokenizer":
        try:
            encoding = tiktoken.encoding_for_model(model)
        except KeyError as e:
            raise TokenizerError(f"Unknown model '{model}'") from e
        except Exception as e:
            raise TokenizerError(f"Could not load encoding for model '{model}': {e}") from e
        return cls(model, encoding)

    def count(self, content: bytes) -> int:
        # Special-token text in file contents is counted like any other text.
        text = content.decode("utf-8", errors="replace")
        return len(self._encoding.encode_ordinary(text))
