"""Pydantic patch DTOs for editing landing-page content.

Every section has its own patch type: only the fields that are set are
merged into that section, the rest of the section is left untouched.
"""

from pydantic import BaseModel, Field

from site_builder.domain.entities import ServiceIcon

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class _Patch(BaseModel):
    model_config = {"extra": "forbid"}


class LogoPatch(_Patch):
    image: str | None = None
    alt: str | None = None


class HeroPatch(_Patch):
    title: str | None = None
    subtitle: str | None = None
    cta_text: str | None = None
    background_image: str | None = None


class AboutPatch(_Patch):
    title: str | None = None
    description: str | None = None
    image: str | None = None


class ServiceItemData(_Patch):
    """A complete service card, used when replacing the whole item list."""

    name: str
    description: str
    price: str
    icon: ServiceIcon = ServiceIcon.STAR


class ServiceItemPatch(_Patch):
    name: str | None = None
    description: str | None = None
    price: str | None = None
    icon: ServiceIcon | None = None


class ServicesPatch(_Patch):
    title: str | None = None
    items: list[ServiceItemData] | None = Field(
        None, description="Replaces the full item list when given",
    )


class ContactPatch(_Patch):
    title: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    hours: str | None = None


class ColorsPatch(_Patch):
    primary: str | None = Field(None, pattern=HEX_COLOR_PATTERN, examples=["#8B4513"])
    secondary: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    accent: str | None = Field(None, pattern=HEX_COLOR_PATTERN)


class FooterPatch(_Patch):
    copyright: str | None = None


class ContentPatch(_Patch):
    """Partial update of a ContentRecord — each section is itself a patch."""

    logo: LogoPatch | None = None
    hero: HeroPatch | None = None
    about: AboutPatch | None = None
    services: ServicesPatch | None = None
    contact: ContactPatch | None = None
    colors: ColorsPatch | None = None
    footer: FooterPatch | None = None
