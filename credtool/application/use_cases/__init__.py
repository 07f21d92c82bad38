"""Application use cases."""

from .retrieve_credentials import PairResult, RetrieveCredentials, prompt_identifier

__all__ = [
    "PairResult",
    "RetrieveCredentials",
    "prompt_identifier",
]
