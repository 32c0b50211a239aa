"""BaseService — shared foundation for playbill services.

Every service receives the resolved :class:`PlaybillSettings` at
construction time and builds its :class:`StatementPrinter` from the
``[pricing]`` and ``[output]`` sections.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from playbill.domain.money import format_usd
from playbill.domain.statement import StatementPrinter

if TYPE_CHECKING:
    from playbill.config.settings import PlaybillSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class StatementService(BaseService):
            def statement(self, invoice, catalog) -> ServiceResult:
                computed = self._printer.compute(invoice, catalog)
                ...
    """

    def __init__(self, settings: PlaybillSettings) -> None:
        self._settings = settings
        self._printer = StatementPrinter(
            settings.pricing,
            partial(
                format_usd,
                cents_per_dollar=settings.pricing.cents_per_dollar,
                symbol=settings.output.currency_symbol,
            ),
        )

    @property
    def printer(self) -> StatementPrinter:
        return self._printer
