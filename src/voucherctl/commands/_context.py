"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Opens the database lazily and turns service
outcomes (values or exceptions) into emitted ServiceResults.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click
from sqlalchemy.exc import SQLAlchemyError

from voucherctl.config.logging import configure_logging
from voucherctl.domain.errors import VoucherError
from voucherctl.domain.store import VoucherNotFoundError
from voucherctl.output.formatters import OutputSettings, format_result
from voucherctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from voucherctl.config.settings import VoucherSettings
    from voucherctl.services.voucher import VoucherService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is created on first use so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: VoucherSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def engine(self) -> Engine:
        """Database engine, initialized on first access."""
        if self._engine is None:
            from voucherctl.infrastructure.database.engine import init_database

            self._engine = init_database(
                self.settings.db_path, echo=self.settings.database.echo
            )
        return self._engine

    @property
    def service(self) -> VoucherService:
        """Rule engine bound to the SQL store."""
        from voucherctl.infrastructure.repositories.voucher import SqlVoucherStore
        from voucherctl.services.voucher import VoucherService

        return VoucherService(
            SqlVoucherStore(self.engine),
            min_amount=self.settings.discount.min_amount,
        )

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def run(self, op: str, action: Callable[[], dict[str, Any]]) -> ServiceResult:
        """Call *action* and wrap its payload (or failure) in a ServiceResult.

        Rule-engine errors keep their kind as the error code.  Store errors
        are reported but not reinterpreted.
        """
        try:
            data = action()
        except VoucherError as exc:
            return ServiceResult(ok=False, op=op, error=ServiceError.from_voucher_error(exc))
        except VoucherNotFoundError as exc:
            return ServiceResult.failure(op, "NOT_FOUND", str(exc), code=exc.code)
        except SQLAlchemyError as exc:
            logger.debug("Store failure during %s", op, exc_info=True)
            return ServiceResult.failure(op, "STORE_ERROR", str(getattr(exc, "orig", None) or exc))
        return ServiceResult(ok=True, op=op, data=data)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
