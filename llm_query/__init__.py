"""
llm_query — rozpoznawanie utworów na stronach śpiewnika przez Gemini.

Publiczne API:
  build_prompt(page_count)                     -> str
  call_gemini(prompt, images, model, api_key)  -> str
  parse_pieces(raw)                            -> list[Piece]
  detect_pieces(images, model, api_key)        -> list[Piece]
"""

from .prompt import PROMPT, RESPONSE_SCHEMA, build_prompt
from .gemini import call_gemini, default_model, DEFAULT_MODEL
from .pieces import parse_pieces, detect_pieces

__all__ = [
    "PROMPT",
    "RESPONSE_SCHEMA",
    "build_prompt",
    "call_gemini",
    "default_model",
    "DEFAULT_MODEL",
    "parse_pieces",
    "detect_pieces",
]
