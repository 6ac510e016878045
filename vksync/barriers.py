"""Barrier descriptions and their translation into Vulkan stage masks and memory barriers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from . import vk
from .access import AccessType, ImageLayout, get_access_info, is_write_access


@dataclass
class GlobalBarrier:
    """Previous and next accesses of all resources affected by a global memory barrier."""

    previous_accesses: Sequence[AccessType] = ()
    next_accesses: Sequence[AccessType] = ()


@dataclass
class BufferBarrier:
    """Accesses of one buffer range, for use when a queue family ownership transfer is needed."""

    previous_accesses: Sequence[AccessType] = ()
    next_accesses: Sequence[AccessType] = ()
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    buffer: int = 0
    offset: int = 0
    size: int = 0


@dataclass
class ImageBarrier:
    """Accesses of one image subresource range, with layout choices for the transition.

    If ``discard_contents`` is true the old layout is undefined, so the
    contents of the image are not preserved across the barrier.
    """

    previous_accesses: Sequence[AccessType] = ()
    next_accesses: Sequence[AccessType] = ()
    previous_layout: ImageLayout = ImageLayout.OPTIMAL
    next_layout: ImageLayout = ImageLayout.OPTIMAL
    discard_contents: bool = False
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    image: int = 0
    range: vk.ImageSubresourceRange = field(default_factory=vk.ImageSubresourceRange)


def _access_masks(
    previous_accesses: Iterable[AccessType], next_accesses: Iterable[AccessType]
) -> tuple[vk.PipelineStageFlags, vk.PipelineStageFlags, vk.AccessFlags, vk.AccessFlags]:
    """Combine the stages and access flags of both access lists."""
    src_stages = vk.PipelineStageFlags(0)
    dst_stages = vk.PipelineStageFlags(0)
    src_access = vk.AccessFlags(0)
    dst_access = vk.AccessFlags(0)

    for access in previous_accesses:
        info = get_access_info(access)
        src_stages |= info.stage_mask
        # Availability operations are only needed for writes.
        if is_write_access(access):
            src_access |= info.access_mask

    for access in next_accesses:
        info = get_access_info(access)
        dst_stages |= info.stage_mask
        # Without prior writes this is a WAR (or RAR) hazard needing no visibility.
        if src_access:
            dst_access |= info.access_mask

    if not src_stages:
        src_stages = vk.PipelineStageFlags.TOP_OF_PIPE
    if not dst_stages:
        dst_stages = vk.PipelineStageFlags.BOTTOM_OF_PIPE

    return src_stages, dst_stages, src_access, dst_access


def _native_layout(choice: ImageLayout, access: AccessType) -> vk.ImageLayout:
    """Map a layout choice and an access type to a native Vulkan layout."""
    if choice is ImageLayout.OPTIMAL:
        return get_access_info(access).image_layout
    if choice is ImageLayout.GENERAL:
        if access is AccessType.PRESENT:
            return vk.ImageLayout.PRESENT_SRC_KHR
        return vk.ImageLayout.GENERAL
    raise ValueError(f"image layout {choice!r} is not supported")


def get_memory_barrier(barrier):
    """Translate a global barrier into source stages, destination stages and a memory barrier."""
    src_stages, dst_stages, src_access, dst_access = _access_masks(
        barrier.previous_accesses, barrier.next_accesses
    )
    memory_barrier = vk.MemoryBarrier(src_access_mask=src_access, dst_access_mask=dst_access)
    return src_stages, dst_stages, memory_barrier


def get_buffer_memory_barrier(barrier):
    """Translate a buffer barrier into source stages, destination stages and a buffer memory barrier."""
    src_stages, dst_stages, src_access, dst_access = _access_masks(
        barrier.previous_accesses, barrier.next_accesses
    )
    buffer_barrier = vk.BufferMemoryBarrier(
        src_access_mask=src_access,
        dst_access_mask=dst_access,
        src_queue_family_index=barrier.src_queue_family_index,
        dst_queue_family_index=barrier.dst_queue_family_index,
        buffer=barrier.buffer,
        offset=barrier.offset,
        size=barrier.size,
    )
    return src_stages, dst_stages, buffer_barrier


def get_image_memory_barrier(barrier):
    """Translate an image barrier into source stages, destination stages and an image memory barrier."""
    src_stages, dst_stages, src_access, dst_access = _access_masks(
        barrier.previous_accesses, barrier.next_accesses
    )

    old_layout = vk.ImageLayout.UNDEFINED
    for access in barrier.previous_accesses:
        if barrier.discard_contents:
            old_layout = vk.ImageLayout.UNDEFINED
        else:
            old_layout = _native_layout(barrier.previous_layout, access)

    new_layout = vk.ImageLayout.UNDEFINED
    for access in barrier.next_accesses:
        new_layout = _native_layout(barrier.next_layout, access)

    image_barrier = vk.ImageMemoryBarrier(
        src_access_mask=src_access,
        dst_access_mask=dst_access,
        old_layout=old_layout,
        new_layout=new_layout,
        src_queue_family_index=barrier.src_queue_family_index,
        dst_queue_family_index=barrier.dst_queue_family_index,
        image=barrier.image,
        subresource_range=barrier.range,
    )
    return src_stages, dst_stages, image_barrier