"""
How an inquiry reached the organization.

Several sources may apply to one inquiry. They are not stored on their own;
the repository folds them into flat columns on the inquiry row.
"""
from enum import IntFlag
from functools import reduce
from operator import or_
from typing import FrozenSet, Union
from pydantic import BaseModel, ConfigDict, field_validator


class InquiryChannel(IntFlag):
    VISIT = 1
    HOTLINE = 2
    SOCIAL_NETWORK = 4
    EMAIL = 8
    PHONE = 16
    MESSENGER = 32


_KNOWN_CHANNEL_BITS = int(reduce(or_, InquiryChannel))


class SelfInquiry(BaseModel):
    channels: FrozenSet[InquiryChannel] = frozenset()
    model_config = ConfigDict(frozen=True)

    @field_validator("channels", mode="before")
    @classmethod
    def _split_channels(cls, value):
        """Accept a combined flag (``EMAIL | PHONE``) or any iterable of channels."""
        if isinstance(value, int):
            value = [value]
        channels = set()
        for item in value:
            bits = int(item)
            if bits & ~_KNOWN_CHANNEL_BITS:
                raise ValueError(f"Unknown inquiry channel bits: {bits & ~_KNOWN_CHANNEL_BITS}")
            channels.update(member for member in InquiryChannel if bits & member)
        return frozenset(channels)


class ForwardedByOrganization(BaseModel):
    name: str
    model_config = ConfigDict(frozen=True)


class ForwardedByPerson(BaseModel):
    name: str
    model_config = ConfigDict(frozen=True)


class ForwardedBySurvivor(BaseModel):
    name: str
    model_config = ConfigDict(frozen=True)


InquirySource = Union[SelfInquiry, ForwardedByOrganization, ForwardedByPerson, ForwardedBySurvivor]
