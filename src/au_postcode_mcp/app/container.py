from __future__ import annotations

from dataclasses import dataclass

from au_postcode_mcp.app.settings import Settings, get_settings
from au_postcode_mcp.infra.http import HttpClient
from au_postcode_mcp.infra.providers.locality_directory import LocalityDirectoryProvider
from au_postcode_mcp.services.validation_service import AddressValidationService


@dataclass(frozen=True)
class Container:
    settings: Settings
    http: HttpClient
    directory: LocalityDirectoryProvider
    validation_service: AddressValidationService


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()

    http = HttpClient(
        timeout_seconds=settings.http_timeout_seconds,
        user_agent=settings.http_user_agent,
        bearer_token=settings.locality_api_token,
    )

    directory = LocalityDirectoryProvider(http=http, api_url=settings.locality_api_url)
    validation_service = AddressValidationService(directory=directory)

    return Container(
        settings=settings,
        http=http,
        directory=directory,
        validation_service=validation_service,
    )
