"""Domain entities for the editable landing-page content of each business."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from site_builder.domain.exceptions import ValidationFailure

logger = logging.getLogger(__name__)


class BusinessType(str, Enum):
    """Supported business variants — the partition key across all stores."""

    BARBERSHOP = "barbershop"
    AUTOMOTIVE = "automotive"

    @classmethod
    def parse(cls, value: "str | BusinessType") -> "BusinessType":
        """Resolve a variant name, rejecting unknown ones with ValidationFailure."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationFailure("business_type", f"unknown business type {value!r}") from None


class ServiceIcon(str, Enum):
    """Closed set of icons a service card can show.

    Each value is the name of the icon the frontend renders for that tag.
    """

    SCISSORS = "Scissors"
    RAZOR = "Slice"
    CROWN = "Crown"
    SPARKLES = "Sparkles"
    DROPLETS = "Droplets"
    CAR = "Car"
    WRENCH = "Wrench"
    SHIELD = "Shield"
    CLOCK = "Clock"
    STAR = "Star"

    @classmethod
    def from_name(cls, name: "str | ServiceIcon") -> "ServiceIcon":
        """Resolve an icon name, falling back to ``STAR`` for unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            logger.warning("Unknown service icon %r — using %s", name, cls.STAR.value)
            return cls.STAR


@dataclass(frozen=True)
class Logo:
    image: str
    alt: str


@dataclass(frozen=True)
class Hero:
    title: str
    subtitle: str
    cta_text: str
    background_image: str


@dataclass(frozen=True)
class About:
    title: str
    description: str
    image: str


@dataclass(frozen=True)
class ServiceItem:
    """A service card on the landing page. ``price`` is free text (e.g. "R$ 35,00")."""

    name: str
    description: str
    price: str
    icon: ServiceIcon = ServiceIcon.STAR


@dataclass(frozen=True)
class Services:
    title: str
    items: tuple[ServiceItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Contact:
    title: str
    address: str
    phone: str
    email: str
    hours: str


@dataclass(frozen=True)
class ThemeColors:
    """Theme palette — each value is a hex color string."""

    primary: str
    secondary: str
    accent: str


@dataclass(frozen=True)
class Footer:
    copyright: str


@dataclass(frozen=True)
class ContentRecord:
    """Full editable content of one business landing page.

    Records are immutable snapshots: every edit produces a new record.
    No cross-field consistency is enforced.
    """

    logo: Logo
    hero: Hero
    about: About
    services: Services
    contact: Contact
    colors: ThemeColors
    footer: Footer
