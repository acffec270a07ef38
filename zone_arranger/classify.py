from enum import Enum

from .rules import CONTRACT_RE, NEW_ZONE_RE, OLD_ZONE_RE, ZONE_CANDIDATE_RE


class TokenClass(Enum):
    CONTRACT = "contract"
    OLD_ZONE = "old_zone"
    NEW_ZONE = "new_zone"
    UNKNOWN = "unknown"


def is_contract(token: str) -> bool:
    return CONTRACT_RE.fullmatch(token) is not None


def is_old_zone(token: str) -> bool:
    return OLD_ZONE_RE.fullmatch(token) is not None


def is_new_zone(token: str) -> bool:
    return NEW_ZONE_RE.fullmatch(token) is not None


def is_zone_candidate(token: str) -> bool:
    """Looser zone shape (Arabic letters, 4 digits, alphanumeric suffix) used by the merge fallback."""
    return ZONE_CANDIDATE_RE.fullmatch(token) is not None


_PREDICATES = (
    (TokenClass.CONTRACT, is_contract),
    (TokenClass.OLD_ZONE, is_old_zone),
    (TokenClass.NEW_ZONE, is_new_zone),
)


def classify_token(token: str) -> TokenClass:
    """Lexical class of a sanitized token; position in the input never matters."""
    for token_class, predicate in _PREDICATES:
        if predicate(token):
            return token_class
    return TokenClass.UNKNOWN


def all_of_class(tokens, token_class: TokenClass) -> bool:
    """True when the block is non-empty and every token has ``token_class``."""
    return bool(tokens) and all(classify_token(t) is token_class for t in tokens)
