"""Method-name vocabularies driving the extractors.

The tables live in ``vocabulary.yaml`` next to this module so they can be
swapped per analyzed UI surface without touching traversal code.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple

import yaml

from ..errors import VocabularyError

VOCABULARY_FILE = Path(__file__).parent / "vocabulary.yaml"

_SECTIONS = ("flow", "inventory", "tea")
_NAME_KEYS = ("ui_methods", "action_methods", "mutating_methods")
_TEA_NAME_KEYS = ("components", "actions", "handler_functions", "state_prefixes")


@dataclass(frozen=True)
class Vocabulary:
    """Closed sets of method names and operators recognized during extraction."""

    ui_methods: frozenset[str] = frozenset()
    """UI-constructor methods (``ui.button(..)``)."""

    action_methods: frozenset[str] = frozenset()
    """Action-query methods (``response.clicked()``)."""

    mutating_methods: frozenset[str] = frozenset()
    """Methods treated as mutating their receiver (``items.push(..)``)."""

    compound_assign_operators: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    """Compound-assign operator token -> mutation type tag."""

    def extend(
        self,
        *,
        ui_methods: frozenset[str] | set[str] = frozenset(),
        action_methods: frozenset[str] | set[str] = frozenset(),
        mutating_methods: frozenset[str] | set[str] = frozenset(),
        compound_assign_operators: Mapping[str, str] | None = None,
    ) -> "Vocabulary":
        """Return a copy with additional members."""
        operators = dict(self.compound_assign_operators)
        operators.update(compound_assign_operators or {})
        return Vocabulary(
            ui_methods=self.ui_methods | frozenset(ui_methods),
            action_methods=self.action_methods | frozenset(action_methods),
            mutating_methods=self.mutating_methods | frozenset(mutating_methods),
            compound_assign_operators=MappingProxyType(operators),
        )


@dataclass(frozen=True)
class TeaVocabulary:
    """Tables for message-passing (Elm architecture) code."""

    components: frozenset[str] = frozenset()
    """Design-system component types (``Button::primary(..)``)."""

    actions: frozenset[str] = frozenset()
    """Component methods that emit a message (``.on_click(ctx, Msg::X)``)."""

    handler_functions: frozenset[str] = frozenset()
    """Impl methods whose ``match msg`` arms are message handlers."""

    state_prefixes: tuple[str, ...] = ()
    """Handler mutation targets must start with one of these."""

    mutations: Vocabulary = field(default_factory=Vocabulary)
    """Mutating methods and compound-assign operators inside handlers."""

    def is_model_state(self, target: str) -> bool:
        return target.startswith(self.state_prefixes)


class Vocabularies(NamedTuple):
    flow: Vocabulary
    inventory: Vocabulary
    tea: TeaVocabulary


def _string_list(data: dict[str, Any], key: str, section: str, path: str) -> list[str]:
    values = data.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise VocabularyError(path, f"'{section}.{key}' must be a list of strings")
    return values


def _operators(data: dict[str, Any], section: str, path: str) -> Mapping[str, str]:
    operators = data.get("compound_assign_operators", {})
    if not isinstance(operators, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in operators.items()
    ):
        raise VocabularyError(
            path, f"'{section}.compound_assign_operators' must map operators to tags"
        )
    return MappingProxyType(dict(operators))


def _parse_section(data: Any, section: str, path: str) -> Vocabulary:
    if not isinstance(data, dict):
        raise VocabularyError(path, f"section '{section}' must be a mapping")

    names = {key: frozenset(_string_list(data, key, section, path)) for key in _NAME_KEYS}
    return Vocabulary(
        ui_methods=names["ui_methods"],
        action_methods=names["action_methods"],
        mutating_methods=names["mutating_methods"],
        compound_assign_operators=_operators(data, section, path),
    )


def _parse_tea_section(data: Any, path: str) -> TeaVocabulary:
    if not isinstance(data, dict):
        raise VocabularyError(path, "section 'tea' must be a mapping")

    names = {key: _string_list(data, key, "tea", path) for key in _TEA_NAME_KEYS}
    return TeaVocabulary(
        components=frozenset(names["components"]),
        actions=frozenset(names["actions"]),
        handler_functions=frozenset(names["handler_functions"]),
        state_prefixes=tuple(names["state_prefixes"]),
        mutations=Vocabulary(
            mutating_methods=frozenset(_string_list(data, "mutating_methods", "tea", path)),
            compound_assign_operators=_operators(data, "tea", path),
        ),
    )


def load_vocabularies(path: str | Path | None = None) -> Vocabularies:
    """Load the flow, inventory and tea vocabularies.

    Args:
        path: YAML file to load. Defaults to the packaged vocabulary.yaml.

    Returns:
        ``Vocabularies(flow, inventory, tea)``.

    Raises:
        VocabularyError: If the file cannot be read or is malformed.
    """
    vocab_path = Path(path) if path is not None else VOCABULARY_FILE
    try:
        with vocab_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise VocabularyError(str(vocab_path), str(exc)) from exc
    except yaml.YAMLError as exc:
        raise VocabularyError(str(vocab_path), f"invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise VocabularyError(str(vocab_path), "top level must be a mapping")

    missing = [section for section in _SECTIONS if section not in data]
    if missing:
        raise VocabularyError(str(vocab_path), f"missing section(s): {', '.join(missing)}")

    return Vocabularies(
        flow=_parse_section(data["flow"], "flow", str(vocab_path)),
        inventory=_parse_section(data["inventory"], "inventory", str(vocab_path)),
        tea=_parse_tea_section(data["tea"], str(vocab_path)),
    )


DEFAULT_VOCABULARY, INVENTORY_VOCABULARY, TEA_VOCABULARY = load_vocabularies()
