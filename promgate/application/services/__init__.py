"""Startup validation services."""

from promgate.application.services.bounds_validator import BoundsValidator
from promgate.application.services.constraint_enforcer import ConstraintEnforcer
from promgate.application.services.mode_resolver import ModeResolver
from promgate.application.services.proto_message_validator import (
    ProtoMessageValidator,
    parse_message_list,
)
from promgate.application.services.startup_sequencer import StartupSequencer

__all__: list[str] = [
    "BoundsValidator",
    "ConstraintEnforcer",
    "ModeResolver",
    "ProtoMessageValidator",
    "StartupSequencer",
    "parse_message_list",
]
