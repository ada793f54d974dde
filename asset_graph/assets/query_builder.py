"""
Asset Query Builder

Assembles Cypher for the four asset graph operations from validated,
typed inputs and the predicate catalog.

Every user value is bound as a ``$`` parameter. The one exception is the
relationship type of a link: Cypher cannot bind relationship types, so
``relationship_type_fragment`` interpolates it after ``require_token``.
No other function in this module may put request text into a query.
"""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Mapping

from asset_graph.assets.catalog import PREDICATE_CATALOG, SearchField, parse_field_value
from asset_graph.assets.models import AccessMode, BuiltQuery, LinkSelector, SearchCriterion
from asset_graph.assets.validators import optional_value, require_token
from asset_graph.shared.exceptions import NoSearchCriteriaError

logger = logging.getLogger("asset_graph.query_builder")

LINK_TYPE_FIELD = "linkType"


def relationship_type_fragment(link_type: str | None) -> str:
    """Return ``link_type`` as a Cypher relationship-type literal.

    This is the only place request text is written into query syntax.
    The token must pass ``require_token`` (letters, digits, ``_``, fewer than
    20 characters); it is then uppercased and backtick-quoted so that a token
    spelling a Cypher keyword stays a plain name. Do not relax the validator.

    Raises:
        MissingFieldError, TooLongError, IllegalCharactersError
    """
    token = require_token(link_type, LINK_TYPE_FIELD)
    return f"`{token.upper()}`"


class AssetQueryBuilder:
    """Stateless builder; each method returns a ready-to-run BuiltQuery."""

    # ─── Assets ────────────────────────────────────────────

    @staticmethod
    def new_asset_id() -> str:
        return str(uuid.uuid4())

    def build_create_asset(
        self, name: str, price: Decimal, purchase_date: datetime
    ) -> BuiltQuery:
        """Insert one Asset under a freshly generated id."""
        params = {
            "id": self.new_asset_id(),
            "name": name,
            "price": price,
            "purchaseDate": purchase_date,
        }
        text = (
            "CREATE (n:Asset {id: $id, name: $name, price: $price, "
            "purchaseDate: $purchaseDate}) RETURN n"
        )
        return BuiltQuery(text, params, AccessMode.WRITE)

    def collect_criteria(
        self, raw: Mapping[SearchField, str | None]
    ) -> list[SearchCriterion]:
        """Turn supplied search values into criteria, in catalog order.

        Absent or blank values are skipped; they impose no constraint.

        Raises:
            BadFormatError: If a supplied amount or date does not parse.
        """
        criteria: list[SearchCriterion] = []
        for search_field, predicate in PREDICATE_CATALOG.items():
            text = optional_value(raw.get(search_field))
            if text is None:
                continue
            criteria.append(
                SearchCriterion(
                    field=search_field,
                    template=predicate.template,
                    value=parse_field_value(search_field, text),
                )
            )
        return criteria

    def build_find_assets(
        self,
        raw: Mapping[SearchField, str | None],
        which_links: LinkSelector = LinkSelector.NONE,
    ) -> BuiltQuery:
        """Build an AND-joined search over the supplied fields.

        Each result row is a list: ``[n]``, ``[n, inLinks]``, ``[n, outLinks]``
        or ``[n, inLinks, outLinks]`` depending on ``which_links``.

        Raises:
            NoSearchCriteriaError: If no field was supplied.
            BadFormatError: If a supplied value does not parse.
        """
        criteria = self.collect_criteria(raw)
        if not criteria:
            raise NoSearchCriteriaError(
                "You have to provide at least one search parameter."
            )

        where = " AND ".join(c.template for c in criteria)
        params = {c.field.param_name: c.value for c in criteria}

        parts = [f"MATCH (n:Asset) WHERE {where}"]
        projection = ["n"]
        if which_links.includes_inbound:
            parts.append("OPTIONAL MATCH (n)<--(inLinks)")
            projection.append("inLinks")
        if which_links.includes_outbound:
            parts.append("OPTIONAL MATCH (n)-->(outLinks)")
            projection.append("outLinks")
        parts.append(f"RETURN [{', '.join(projection)}]")

        text = " ".join(parts)
        logger.debug("Built search: %s", text)
        return BuiltQuery(text, params, AccessMode.READ)

    # ─── Links ─────────────────────────────────────────────

    def build_create_link(
        self, id_from: str, id_to: str, link_type: str
    ) -> BuiltQuery:
        """Create (or keep) the ``id_from -[link_type]-> id_to`` relationship.

        MERGE keeps the (from, to, type) triplet unique. If either asset is
        missing the MATCH yields no row and nothing is written.
        """
        rel_type = relationship_type_fragment(link_type)
        text = (
            "MATCH (a:Asset {id: $idFrom}), (b:Asset {id: $idTo}) "
            f"MERGE (a)-[r:{rel_type}]->(b) "
            "RETURN [a, b, r]"
        )
        logger.debug("Built link create: %s", text)
        return BuiltQuery(text, {"idFrom": id_from, "idTo": id_to}, AccessMode.WRITE)

    def build_delete_link(
        self, id_from: str, id_to: str, link_type: str
    ) -> BuiltQuery:
        """Delete the ``id_from -[link_type]-> id_to`` relationship, if present."""
        rel_type = relationship_type_fragment(link_type)
        text = (
            f"MATCH (a:Asset {{id: $idFrom}})-[r:{rel_type}]->(b:Asset {{id: $idTo}}) "
            "DELETE r "
            "RETURN [a, b, r]"
        )
        logger.debug("Built link delete: %s", text)
        return BuiltQuery(text, {"idFrom": id_from, "idTo": id_to}, AccessMode.WRITE)
