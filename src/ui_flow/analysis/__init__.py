from .describe import describe, looks_like_state
from .flows import FlowExtractor, extract_flows
from .inventory import extract_actions, extract_state_mutations, extract_ui_elements
from .mutations import MutationScanner, collect_mutations
from .resolver import construct_ui_element, resolve_ui_element
from .scope import ScopeFrame, ScopeStack, Site
from .tea import build_tea_flows, extract_msg_emissions, extract_msg_handlers
from .triggers import collect_triggers

__all__ = [
    "FlowExtractor",
    "MutationScanner",
    "ScopeFrame",
    "ScopeStack",
    "Site",
    "build_tea_flows",
    "collect_mutations",
    "collect_triggers",
    "construct_ui_element",
    "describe",
    "extract_actions",
    "extract_flows",
    "extract_msg_emissions",
    "extract_msg_handlers",
    "extract_state_mutations",
    "extract_ui_elements",
    "looks_like_state",
    "resolve_ui_element",
]
