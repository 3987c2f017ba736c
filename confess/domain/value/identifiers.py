"""Strongly typed identifiers for confession entities."""

from typing import NewType
from uuid import UUID

ConfessionId = NewType("ConfessionId", UUID)
