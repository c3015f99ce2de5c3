"""Bed tag use cases."""

from .common import BedTagItem
from .create_bed_tag import (
    CreateBedTagRequest,
    CreateBedTagResponse,
    CreateBedTagUseCase,
)
from .list_bed_tags import ListBedTagsRequest, ListBedTagsResponse, ListBedTagsUseCase
from .update_bed_tag import (
    UpdateBedTagRequest,
    UpdateBedTagResponse,
    UpdateBedTagUseCase,
)
from .void_bed_tag import VoidBedTagRequest, VoidBedTagResponse, VoidBedTagUseCase

__all__ = [
    "BedTagItem",
    "CreateBedTagRequest",
    "CreateBedTagResponse",
    "CreateBedTagUseCase",
    "ListBedTagsRequest",
    "ListBedTagsResponse",
    "ListBedTagsUseCase",
    "UpdateBedTagRequest",
    "UpdateBedTagResponse",
    "UpdateBedTagUseCase",
    "VoidBedTagRequest",
    "VoidBedTagResponse",
    "VoidBedTagUseCase",
]
