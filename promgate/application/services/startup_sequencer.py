"""Startup validation pipeline.

This service runs the startup checks in a fixed order and turns the
first failure into a single Rejected verdict:

1. Resolve the operating mode
2. Enforce mode flag constraints
3. Bounds-check numeric flags
4. Validate requested remote-write protobuf messages
5. Compute the external URL
6. Load the configuration file and enforce mode config constraints

States advance INIT -> MODE_RESOLVED -> CONSTRAINTS_CHECKED ->
BOUNDS_CHECKED -> PROTO_CHECKED -> EXTERNAL_URL_CHECKED -> CONFIG_CHECKED
and end in Accepted, or jump to Rejected on the first failure.

The sequencer performs no I/O itself: the config loader and the hostname
lookup are injected. Given the same flags and collaborators, repeated
runs return equal verdicts.

Usage:
    sequencer = StartupSequencer(config_loader=YamlConfigLoader())
    verdict = sequencer.run(flags)
    if not verdict.is_accepted:
        sys.exit(verdict.exit_code)
"""

from __future__ import annotations

import socket
from collections.abc import Callable

from structlog import get_logger

from promgate.application.ports.config_loader import ConfigLoaderProtocol
from promgate.application.services.bounds_validator import BoundsValidator
from promgate.application.services.constraint_enforcer import ConstraintEnforcer
from promgate.application.services.external_url import compute_external_url
from promgate.application.services.mode_resolver import ModeResolver
from promgate.application.services.proto_message_validator import (
    ProtoMessageValidator,
    parse_message_list,
)
from promgate.config.storage_limits import DEFAULT_CONFIG_FILE, DEFAULT_LISTEN_ADDRESS
from promgate.domain.errors.startup import ExternalUrlError, StartupValidationError
from promgate.domain.models.bound_spec import BoundsTable
from promgate.domain.models.constraint_rule import ConstraintTable
from promgate.domain.models.flag_set import FlagSet
from promgate.domain.models.mode import Mode
from promgate.domain.models.proto_message import ProtoMessageRegistry
from promgate.domain.models.verdict import (
    Accepted,
    Rejected,
    StartupStage,
    ValidationVerdict,
)
from promgate.domain.primitives import flag_names
from promgate.domain.primitives.startup_tables import (
    BOUNDS_TABLE,
    CONSTRAINT_TABLE,
    PROTO_MESSAGE_REGISTRY,
)

logger = get_logger()


class StartupSequencer:
    """Orchestrates the startup checks into one verdict.

    Attributes:
        _config_loader: Port used to load the configuration file.
        _bounds_table: Bounds checked in step 3.
        _hostname_provider: Returns the hostname for the default external URL.
    """

    def __init__(
        self,
        config_loader: ConfigLoaderProtocol,
        constraint_table: ConstraintTable = CONSTRAINT_TABLE,
        bounds_table: BoundsTable = BOUNDS_TABLE,
        proto_registry: ProtoMessageRegistry = PROTO_MESSAGE_REGISTRY,
        hostname_provider: Callable[[], str] = socket.gethostname,
    ) -> None:
        """Initialize the sequencer.

        Args:
            config_loader: Port used to load the configuration file.
            constraint_table: Mode constraints to enforce.
            bounds_table: Numeric flag bounds to enforce.
            proto_registry: Recognized remote-write message types.
            hostname_provider: Returns the hostname for the default external URL.
        """
        self._config_loader = config_loader
        self._bounds_table = bounds_table
        self._hostname_provider = hostname_provider
        self._mode_resolver = ModeResolver()
        self._constraint_enforcer = ConstraintEnforcer(constraint_table)
        self._bounds_validator = BoundsValidator()
        self._proto_validator = ProtoMessageValidator(
            proto_registry,
            flag_name=flag_names.WEB_REMOTE_WRITE_RECEIVER_PROTO_MSGS,
        )

    def run(self, flags: FlagSet) -> ValidationVerdict:
        """Validate a startup attempt.

        Args:
            flags: Parsed command-line flags.

        Returns:
            Accepted with the resolved mode, or Rejected describing the
            first failure.
        """
        log = logger.bind(component="startup_sequencer", flag_count=len(flags))
        log.debug("startup_validation_started")

        stage = StartupStage.INIT
        mode: Mode | None = None
        try:
            mode = self._mode_resolver.resolve(flags)
            stage = StartupStage.MODE_RESOLVED
            log = log.bind(mode=mode.value)
            log.debug("startup_stage_passed", stage=stage.value)

            self._constraint_enforcer.enforce(mode, flags)
            stage = StartupStage.CONSTRAINTS_CHECKED
            log.debug("startup_stage_passed", stage=stage.value)

            self._bounds_validator.validate(flags, self._bounds_table)
            stage = StartupStage.BOUNDS_CHECKED
            log.debug("startup_stage_passed", stage=stage.value)

            protobuf_messages = self._proto_validator.validate(
                parse_message_list(
                    flags.get(flag_names.WEB_REMOTE_WRITE_RECEIVER_PROTO_MSGS, "")
                )
            )
            stage = StartupStage.PROTO_CHECKED
            log.debug("startup_stage_passed", stage=stage.value)

            external_url = self._external_url(flags)
            stage = StartupStage.EXTERNAL_URL_CHECKED
            log.debug("startup_stage_passed", stage=stage.value)

            config = self._config_loader.load(
                flags.get(flag_names.CONFIG_FILE, DEFAULT_CONFIG_FILE)
            )
            self._constraint_enforcer.enforce_config(mode, config)
            stage = StartupStage.CONFIG_CHECKED
            log.debug("startup_stage_passed", stage=stage.value)
        except StartupValidationError as e:
            rejected = Rejected.from_error(e, last_passed_stage=stage, mode=mode)
            log.debug(
                "startup_validation_rejected",
                error_kind=rejected.error_kind.value,
                last_passed_stage=stage.value,
                detail=rejected.detail,
            )
            return rejected

        log.info(
            "startup_validation_accepted",
            external_url=external_url,
            protobuf_messages=sorted(m.identifier for m in protobuf_messages),
        )
        return Accepted(
            mode=mode,
            protobuf_messages=protobuf_messages,
            external_url=external_url,
            config=config,
        )

    def _external_url(self, flags: FlagSet) -> str:
        external_url = flags.get(flag_names.WEB_EXTERNAL_URL, "")
        hostname = ""
        if not external_url:
            try:
                hostname = self._hostname_provider()
            except OSError as e:
                raise ExternalUrlError(
                    external_url, f"hostname lookup failed: {e}"
                ) from e
        return compute_external_url(
            external_url,
            flags.get(flag_names.WEB_LISTEN_ADDRESS, DEFAULT_LISTEN_ADDRESS),
            hostname,
        )


__all__ = ["StartupSequencer"]
