"""Options for the place details endpoint."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gplaces.options.request import DETAILS_URL, PlacesRequest, QueryBuilder, require_string

logger = logging.getLogger(__name__)


@dataclass
class PlacesGetDetailsOptions:
    place_id: Optional[str] = None
    language: Optional[str] = None
    # Restricts the returned fields, e.g. ["name", "geometry"]. Empty means all.
    fields: List[str] = field(default_factory=list)

    def get_request(self) -> PlacesRequest:
        require_string("place_id", self.place_id)

        query = QueryBuilder().add("placeid", self.place_id.strip())
        query.add_string("language", self.language)
        query.add_list("fields", self.fields)

        request = query.build(DETAILS_URL)
        logger.debug("Built details request for place_id=%s", self.place_id)
        return request
