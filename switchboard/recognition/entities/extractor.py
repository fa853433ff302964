"""Regex-driven entity extraction.

Each entity type owns an ordered list of patterns and a normalizer.
All matches of a type are collected pattern by pattern, normalized (a
normalizer may drop a match by returning None) and scored with a
confidence that decays with every additional match of the same type.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from switchboard.recognition.enums import EntityType
from switchboard.recognition.models import Entity

_WEEKDAYS = "segunda|terca|quarta|quinta|sexta|sabado|domingo"


@dataclass(frozen=True)
class EntityRule:
    """Patterns and normalizer for one entity type.

    A pattern with a capture group contributes the group span;
    otherwise the whole match.
    """

    type: EntityType
    patterns: tuple[re.Pattern[str], ...]
    normalize: Callable[[str], str | None]


def normalize_date(value: str) -> str:
    return value.lower()


def normalize_time(value: str) -> str:
    """Render clock times as HH:MM; day periods stay words."""
    match = re.fullmatch(r"(\d{1,2})(?:h|:)(\d{2})?", value)
    if not match:
        return value
    hour, minute = match.groups()
    return f"{int(hour):02d}:{minute or '00'}"


def normalize_phone(value: str) -> str | None:
    digits = re.sub(r"\D", "", value)
    return digits if len(digits) >= 10 else None


_URGENCY = {
    "urgente": "alta",
    "emergencia": "alta",
    "prioridade": "media",
    "rapido": "media",
    "logo": "media",
}


def normalize_urgency(value: str) -> str:
    return _URGENCY.get(value, "baixa")


def normalize_min_length(value: str) -> str | None:
    return value if len(value) > 2 else None


def normalize_person_name(value: str) -> str | None:
    return value.title() if len(value) > 1 else None


SERVICE_NAME_RULE = EntityRule(
    type=EntityType.SERVICE_NAME,
    patterns=(
        re.compile(r"\b(?:servico|tratamento|consulta|aula|treino|sessao)\s+de\s+(\w+)"),
        re.compile(r"\b(?:fazer|marcar|agendar)\s+(?:um|uma)\s+(\w+)"),
    ),
    normalize=normalize_min_length,
)

DATE_RULE = EntityRule(
    type=EntityType.DATE,
    patterns=(
        re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b"),
        re.compile(r"\b\d{1,2}/\d{1,2}\b(?!/)"),
        re.compile(rf"\b(?:hoje|amanha|{_WEEKDAYS})\b"),
        re.compile(rf"\bproxim[oa]\s+(?:{_WEEKDAYS})\b"),
    ),
    normalize=normalize_date,
)

TIME_RULE = EntityRule(
    type=EntityType.TIME,
    patterns=(
        re.compile(r"\b\d{1,2}:\d{2}\b"),
        re.compile(r"\b\d{1,2}h\d{2}\b"),
        re.compile(r"\b\d{1,2}h\b"),
        re.compile(r"\b(?:manha|tarde|noite|madrugada)\b"),
    ),
    normalize=normalize_time,
)

PERSON_NAME_RULE = EntityRule(
    type=EntityType.PERSON_NAME,
    patterns=(re.compile(r"\b(?:meu nome e|me chamo|sou o|sou a)\s+([a-z]+)"),),
    normalize=normalize_person_name,
)

PHONE_NUMBER_RULE = EntityRule(
    type=EntityType.PHONE_NUMBER,
    patterns=(
        re.compile(r"\b\d{2}\s\d{4,5}\s?\d{4}\b"),
        re.compile(r"\b\d{10,11}\b"),
    ),
    normalize=normalize_phone,
)

URGENCY_LEVEL_RULE = EntityRule(
    type=EntityType.URGENCY_LEVEL,
    patterns=(re.compile(r"\b(?:urgente|emergencia|prioridade|rapido|logo)\b"),),
    normalize=normalize_urgency,
)

DEFAULT_RULES: tuple[EntityRule, ...] = (
    SERVICE_NAME_RULE,
    DATE_RULE,
    TIME_RULE,
    PERSON_NAME_RULE,
    PHONE_NUMBER_RULE,
    URGENCY_LEVEL_RULE,
)

# Reduced set used by the statistical engine
STATISTICAL_RULES: tuple[EntityRule, ...] = (DATE_RULE, TIME_RULE, PHONE_NUMBER_RULE)


class EntityExtractor:
    """Pure function of the normalized text; holds no state between calls."""

    def __init__(
        self,
        rules: Sequence[EntityRule] = DEFAULT_RULES,
        base_confidence: float = 0.8,
        confidence_decay: float = 0.1,
    ) -> None:
        self._rules = tuple(rules)
        self._base_confidence = base_confidence
        self._confidence_decay = confidence_decay

    def extract(self, normalized_text: str) -> list[Entity]:
        entities: list[Entity] = []

        for rule in self._rules:
            index = 0
            for pattern in rule.patterns:
                for match in pattern.finditer(normalized_text):
                    group = 1 if pattern.groups else 0
                    value = rule.normalize(match.group(group))
                    if value is None:
                        continue
                    confidence = self._base_confidence - index * self._confidence_decay
                    entities.append(
                        Entity(
                            type=rule.type,
                            value=value,
                            confidence=min(max(confidence, 0.0), 1.0),
                            start=match.start(group),
                            end=match.end(group),
                        )
                    )
                    index += 1

        return entities
