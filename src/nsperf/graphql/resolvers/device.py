from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from .context import get_loaders, get_repository

if TYPE_CHECKING:
    from ..types.device import Device
    from ..types.startup_info import StartUpInfo


async def resolve_device_by_token(info: strawberry.Info, token: str) -> Device | None:
    from ..types.device import Device

    record = await get_repository(info).get_device_by_token(token)
    return Device.from_record(record) if record else None


async def resolve_devices(info: strawberry.Info) -> list[Device]:
    from ..types.device import Device

    records = await get_repository(info).list_devices()
    return [Device.from_record(record) for record in records]


async def resolve_device_startup_infos(device: Device, info: strawberry.Info) -> list[StartUpInfo]:
    from ..types.startup_info import StartUpInfo

    if device.id is None:
        return []
    records = await get_loaders(info).startup_infos_by_device_loader.load(device.id)
    return [StartUpInfo.from_record(record) for record in records]


async def create_device(
    info: strawberry.Info,
    name: str,
    token: str,
    device_type: str | None,
    os_version: str | None,
) -> Device:
    from ..types.device import Device

    record = await get_repository(info).create_device(
        name=name, token=token, device_type=device_type, os_version=os_version
    )
    return Device.from_record(record)
