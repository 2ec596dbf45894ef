"""
llm_query/gemini.py — wywołanie Gemini API z obrazami stron.

Zmienne środowiskowe:
  GEMINI_API_KEY   klucz API (wymagany)
  GEMINI_MODEL     identyfikator modelu (opcjonalny, domyślnie DEFAULT_MODEL)

Opcjonalnie plik .env w katalogu głównym projektu:
  GEMINI_API_KEY=AIza...

Publiczne API:
  call_gemini(prompt, images, model, api_key, max_retries) -> str
  default_model() -> str
"""

from __future__ import annotations

import functools
import os
import pathlib
import re
import sys
import time
from collections.abc import Sequence
from typing import Any, Protocol, cast

from dotenv import load_dotenv
from google import genai as _genai
from google.genai import errors as _genai_errors
from google.genai import types as _genai_types

from .prompt import RESPONSE_SCHEMA

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


DEFAULT_MODEL   = "gemini-2.5-flash"
DEFAULT_RETRIES = 3
IMAGE_MIME_TYPE = "image/jpeg"
_ENV_KEY        = "GEMINI_API_KEY"
_ENV_MODEL      = "GEMINI_MODEL"


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> "_genai.Client":
    """Zwraca (i cache'uje) klienta Gemini dla danego klucza API."""
    return _genai.Client(api_key=api_key)

# Wzorzec do wyciągnięcia liczby sekund z komunikatu API (np. "retry in 18.8s")
_RETRY_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


class _GeminiGenerateResponse(Protocol):
    text: str | None


class _GeminiModelsAPI(Protocol):
    def generate_content(
        self, *, model: str, contents: list[Any], config: Any
    ) -> _GeminiGenerateResponse:
        ...


def default_model() -> str:
    return os.getenv(_ENV_MODEL) or DEFAULT_MODEL


def _parse_retry_delay(error: Exception) -> float | None:
    """Wyciąga sugerowany czas oczekiwania z błędu 429, jeśli jest dostępny."""
    m = _RETRY_DELAY_RE.search(str(error))
    if m:
        return float(m.group(1))
    delay = getattr(error, "retry_delay", None)
    if delay is not None:
        return float(delay)
    return None


def _is_daily_quota(error: Exception) -> bool:
    """Zwraca True gdy to wyczerpany dzienny limit (retry nie pomoże)."""
    return "PerDay" in str(error)


def _build_contents(prompt: str, images: Sequence[bytes]) -> list[Any]:
    parts: list[Any] = [prompt]
    for data in images:
        parts.append(_genai_types.Part.from_bytes(data=data, mime_type=IMAGE_MIME_TYPE))
    return parts


def call_gemini(
    prompt: str,
    images: Sequence[bytes],
    model: str | None = None,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> str:
    """
    Wysyła prompt z obrazami stron do Gemini i zwraca odpowiedź (JSON) jako string.

    Przy błędzie 429 (rate-limit) czeka sugerowany czas i ponawia próbę
    (do max_retries razy). Dzienny limit quota nie jest ponawiany.

    Args:
        prompt:      Instrukcja dla modelu.
        images:      Obrazy JPEG stron w kolejności dokumentu.
        model:       Identyfikator modelu; None → GEMINI_MODEL lub DEFAULT_MODEL.
        api_key:     Klucz API; jeśli None, odczytywany z GEMINI_API_KEY.
        max_retries: Maks. liczba ponowień przy rate-limit.

    Returns:
        Tekst odpowiedzi modelu.

    Raises:
        ValueError:                   Brak klucza API.
        RuntimeError:                 Pusta odpowiedź lub wyczerpany limit.
        google.genai.errors.APIError: Nieodwracalny błąd API.
    """
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Brak klucza Gemini API. "
            f"Ustaw zmienną środowiskową {_ENV_KEY} lub przekaż api_key."
        )

    model    = model or default_model()
    client   = _get_client(key)
    contents = _build_contents(prompt, images)
    config   = _genai_types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=RESPONSE_SCHEMA,
    )
    attempt = 0

    while True:
        try:
            models_api = cast(_GeminiModelsAPI, client.models)
            response = models_api.generate_content(model=model, contents=contents, config=config)
            text = response.text
            if text is None:
                raise RuntimeError("Gemini zwrócił pustą odpowiedź tekstową.")
            return text

        except _genai_errors.ClientError as exc:
            if exc.code != 429:
                raise

            if _is_daily_quota(exc):
                raise RuntimeError(
                    f"Dzienny limit zapytań dla modelu {model} wyczerpany. "
                    f"Sprawdź plan i billing: https://ai.dev/rate-limit\n"
                    f"Szczegóły API: {exc}"
                ) from exc

            attempt += 1
            if attempt > max_retries:
                raise RuntimeError(
                    f"Rate-limit po {max_retries} próbach. Spróbuj później."
                ) from exc

            delay = _parse_retry_delay(exc) or (2 ** attempt * 5)
            print(
                f"[warn] 429 rate-limit — czekam {delay:.0f}s "
                f"(próba {attempt}/{max_retries})...",
                file=sys.stderr,
            )
            time.sleep(delay)
