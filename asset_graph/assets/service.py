"""
Asset Service: the four operations exposed to the transport layer.

Validates and parses request strings, builds the query, runs it through
the executor and shapes the result. All input errors are raised before
any session is opened.
"""

import logging
from typing import Any

from asset_graph.assets.catalog import SearchField
from asset_graph.assets.executor import QueryExecutor
from asset_graph.assets.models import Asset, LinkOutcome, LinkSelector
from asset_graph.assets.parsers import parse_amount, parse_timestamp
from asset_graph.assets.query_builder import AssetQueryBuilder
from asset_graph.assets.shaper import ResultShaper
from asset_graph.assets.validators import require_non_empty

logger = logging.getLogger("asset_graph.service")

LINK_NOT_CREATED = "One or both assets not found. Link has not been created."
LINK_NOT_DELETED = "There was no such link to delete."


class AssetService:
    """Entry point for asset and link operations."""

    def __init__(
        self,
        executor: QueryExecutor,
        builder: AssetQueryBuilder | None = None,
        shaper: ResultShaper | None = None,
    ):
        self._executor = executor
        self._builder = builder or AssetQueryBuilder()
        self._shaper = shaper or ResultShaper()

    async def create_asset(
        self, name: str | None, price: str | None, date: str | None
    ) -> Asset:
        """Create an Asset from raw request strings.

        Raises:
            MissingFieldError: If any argument is absent or blank.
            BadFormatError: If price or date does not parse.
        """
        name = require_non_empty(name, "name")
        parsed_price = parse_amount(require_non_empty(price, "price"), "price")
        parsed_date = parse_timestamp(require_non_empty(date, "date"), "date")

        query = self._builder.build_create_asset(name, parsed_price, parsed_date)
        asset = self._shaper.shape_asset(await self._executor.execute(query))
        logger.info("Created asset %s", asset.id)
        return asset

    async def find_assets(
        self,
        id: str | None = None,
        name: str | None = None,
        price_equal: str | None = None,
        price_greater_than: str | None = None,
        price_lesser_than: str | None = None,
        date_on: str | None = None,
        date_after: str | None = None,
        date_before: str | None = None,
        which_links: str | None = None,
    ) -> list[list[Any]]:
        """Search assets by any combination of the optional filters.

        Returns one list per matched row; its length depends on ``which_links``.

        Raises:
            NoSearchCriteriaError: If every filter is absent or blank.
            BadFormatError: If a filter or ``which_links`` does not parse.
        """
        raw = {
            SearchField.ID: id,
            SearchField.NAME: name,
            SearchField.PRICE_EQUAL: price_equal,
            SearchField.PRICE_GREATER_THAN: price_greater_than,
            SearchField.PRICE_LESSER_THAN: price_lesser_than,
            SearchField.DATE_ON: date_on,
            SearchField.DATE_AFTER: date_after,
            SearchField.DATE_BEFORE: date_before,
        }
        selector = LinkSelector.parse(which_links)
        query = self._builder.build_find_assets(raw, selector)
        rows = self._shaper.shape_rows(await self._executor.execute(query))
        logger.info("Search matched %d row(s) (links=%s)", len(rows), selector.value)
        return rows

    async def create_link(
        self, id_from: str | None, id_to: str | None, link_type: str | None
    ) -> LinkOutcome:
        """Link two assets. A missing asset gives a NOOP outcome, not an error."""
        id_from = require_non_empty(id_from, "idFrom")
        id_to = require_non_empty(id_to, "idTo")
        query = self._builder.build_create_link(id_from, id_to, link_type)

        outcome = self._shaper.shape_link_rows(
            await self._executor.execute(query), LINK_NOT_CREATED
        )
        logger.info(
            "Link %s -> %s: %s", id_from, id_to, outcome.status.value
        )
        return outcome

    async def delete_link(
        self, id_from: str | None, id_to: str | None, link_type: str | None
    ) -> LinkOutcome:
        """Remove a link. An absent link gives a NOOP outcome, not an error."""
        id_from = require_non_empty(id_from, "idFrom")
        id_to = require_non_empty(id_to, "idTo")
        query = self._builder.build_delete_link(id_from, id_to, link_type)

        outcome = self._shaper.shape_link_rows(
            await self._executor.execute(query), LINK_NOT_DELETED
        )
        logger.info(
            "Unlink %s -> %s: %s", id_from, id_to, outcome.status.value
        )
        return outcome
