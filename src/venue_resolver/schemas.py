"""
Boundary schemas: turn raw caller payloads into resolver input.

Malformed payloads are rejected here, before the resolver runs, with a
PayloadValidationError.
"""
import logging
from typing import Any, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import PayloadValidationError
from .models import CatalogEntry, ResolverInput

logger = logging.getLogger(__name__)


class VenueCatalogRow(BaseModel):
    id: str = Field(min_length=1, description="Stable venue id")
    name: str = Field(description="Display name of the venue")
    slug: Optional[str] = Field(default=None, description="URL slug, if the venue has one")

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry(id=self.id, name=self.name, slug=self.slug)


class DraftPayload(BaseModel):
    """Venue-related fields of an event draft; other draft fields pass through."""

    model_config = ConfigDict(extra="allow")

    venue_id: Optional[str] = Field(default=None, description="Proposed catalog venue id")
    venue_name: Optional[str] = Field(default=None, description="Proposed venue name")
    custom_location_name: Optional[str] = Field(
        default=None, description="Free-text location that is not a catalog venue"
    )
    location_mode: Optional[str] = Field(default=None, description="venue, online or hybrid")
    online_url: Optional[str] = Field(default=None, description="URL of an online event")

    @property
    def is_custom_location(self) -> bool:
        """A custom location name was given and no venue id competes with it."""
        return bool(self.custom_location_name and self.custom_location_name.strip()) and not self.venue_id

    @property
    def proposed_name(self) -> Optional[str]:
        # venue_name wins; custom_location_name is only a fallback
        if self.venue_name is not None:
            return self.venue_name
        return self.custom_location_name


def _validation_message(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
    )


def load_catalog(rows: Iterable[Mapping[str, Any]]) -> Tuple[CatalogEntry, ...]:
    """
    Validate catalog rows and de-duplicate them by id.
    
    The first row for an id wins; later duplicates are logged and dropped.
    
    :param rows: Raw catalog rows ({"id", "name", "slug"?})
    :return: Tuple of CatalogEntry
    :raises PayloadValidationError: If a row is malformed
    """
    entries = {}
    for position, row in enumerate(rows):
        try:
            entry = VenueCatalogRow.model_validate(row).to_entry()
        except ValidationError as e:
            raise PayloadValidationError(
                f"Invalid venue catalog row {position}: {_validation_message(e)}"
            ) from e
        
        if entry.id in entries:
            logger.warning(f"Duplicate venue id '{entry.id}' in catalog; keeping the first row")
            continue
        entries[entry.id] = entry
    
    return tuple(entries.values())


def build_resolver_input(
    draft_payload: Mapping[str, Any],
    user_message: str,
    catalog_rows: Iterable[Mapping[str, Any]],
) -> ResolverInput:
    """
    Build a ResolverInput from a draft payload, the message and catalog rows.
    
    :param draft_payload: Draft event fields
    :param user_message: User's original message
    :param catalog_rows: Raw catalog rows
    :return: ResolverInput ready for VenueResolver.resolve
    :raises PayloadValidationError: If the draft or catalog is malformed
    """
    if not isinstance(user_message, str):
        raise PayloadValidationError("user_message must be a string")
    
    try:
        draft = DraftPayload.model_validate(draft_payload)
    except ValidationError as e:
        raise PayloadValidationError(f"Invalid draft payload: {_validation_message(e)}") from e
    
    return ResolverInput(
        proposed_id=draft.venue_id,
        proposed_name=draft.proposed_name,
        user_message=user_message,
        catalog=load_catalog(catalog_rows),
        location_mode=draft.location_mode,
        online_url=draft.online_url,
        is_custom_location=draft.is_custom_location,
    )
