"""Records produced by the extractors.

All records are immutable value types; copies are made with
``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from typing import Any

# Line numbers are not tracked yet; every record carries this placeholder.
LINE_UNKNOWN = 0


@dataclass(frozen=True)
class UiElement:
    """A UI-construction call (e.g. ``ui.button("Save")``) or a reference to one."""

    element_type: str
    """Constructor method name, or the ``response_var`` / ``unknown`` sentinels."""

    label: str | None
    """First string-literal argument, if any."""

    context: str
    """Enclosing function name ("" outside any function)."""

    file_path: str
    line: int = LINE_UNKNOWN

    response_var: str | None = None
    """Local variable through which the element was referenced."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "element_type": self.element_type,
            "label": self.label,
            "context": self.context,
            "file_path": self.file_path,
            "line": self.line,
            "response_var": self.response_var,
        }


@dataclass(frozen=True)
class Action:
    """An action query on a UI element (e.g. ``.clicked()``)."""

    action_type: str
    source: str
    """Canonical path of the queried receiver; diagnostic only."""

    context: str
    file_path: str
    line: int = LINE_UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "action_type": self.action_type,
            "source": self.source,
            "context": self.context,
            "file_path": self.file_path,
            "line": self.line,
        }


@dataclass(frozen=True)
class StateMutation:
    """A write to something that looks like application state."""

    target: str
    mutation_type: str
    """``assign``, ``add_assign``, ..., or ``method:<name>``."""

    context: str
    file_path: str
    line: int = LINE_UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "mutation_type": self.mutation_type,
            "context": self.context,
            "file_path": self.file_path,
            "line": self.line,
        }


@dataclass(frozen=True)
class UiFlow:
    """UI element -> action -> state mutations, as gated by one conditional."""

    ui_element: UiElement
    action: Action
    state_mutations: tuple[StateMutation, ...]
    context: str

    def __post_init__(self) -> None:
        if not self.state_mutations:
            raise ValueError("UiFlow requires at least one state mutation")

    def to_dict(self) -> dict[str, Any]:
        return {
            "ui_element": self.ui_element.to_dict(),
            "action": self.action.to_dict(),
            "state_mutations": [m.to_dict() for m in self.state_mutations],
            "context": self.context,
        }


@dataclass(frozen=True)
class MsgEmission:
    """A design-system component emitting a message.

    ``Button::primary("+").on_click(ctx, Msg::Increment)``
    """

    component: str
    """Component type (``Button``, ``Input``, ...)."""

    variant: str
    """Constructor used (``primary``, ``new``, ...)."""

    label: str | None
    action: str
    """Emitting method (``on_click``, ``on_change``, ...)."""

    msg: str
    """Emitted message path, e.g. ``Msg::Increment``."""

    context: str
    file_path: str
    line: int = LINE_UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "component": self.component,
            "variant": self.variant,
            "label": self.label,
            "action": self.action,
            "msg": self.msg,
            "context": self.context,
            "file_path": self.file_path,
            "line": self.line,
        }


@dataclass(frozen=True)
class MsgHandler:
    """A ``match msg`` arm in an update function and the state it mutates."""

    msg_pattern: str
    state_mutations: tuple[StateMutation, ...]
    file_path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "msg_pattern": self.msg_pattern,
            "state_mutations": [m.to_dict() for m in self.state_mutations],
            "file_path": self.file_path,
        }


@dataclass(frozen=True)
class TeaFlow:
    """Component -> message -> handler; ``handler`` is None when no arm matches."""

    emission: MsgEmission
    handler: MsgHandler | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "emission": self.emission.to_dict(),
            "handler": self.handler.to_dict() if self.handler is not None else None,
        }


@dataclass(frozen=True)
class FileAnalysis:
    """Everything extracted from a single source file."""

    path: str
    ui_elements: tuple[UiElement, ...] = field(default_factory=tuple)
    actions: tuple[Action, ...] = field(default_factory=tuple)
    state_mutations: tuple[StateMutation, ...] = field(default_factory=tuple)
    flows: tuple[UiFlow, ...] = field(default_factory=tuple)
    """Scope-aware causality records."""

    msg_emissions: tuple[MsgEmission, ...] = field(default_factory=tuple)
    msg_handlers: tuple[MsgHandler, ...] = field(default_factory=tuple)
    tea_flows: tuple[TeaFlow, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "ui_elements": [e.to_dict() for e in self.ui_elements],
            "actions": [a.to_dict() for a in self.actions],
            "state_mutations": [m.to_dict() for m in self.state_mutations],
            "flows": [f.to_dict() for f in self.flows],
            "msg_emissions": [e.to_dict() for e in self.msg_emissions],
            "msg_handlers": [h.to_dict() for h in self.msg_handlers],
            "tea_flows": [t.to_dict() for t in self.tea_flows],
        }
