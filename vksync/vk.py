"""Vulkan enumerations, flag sets and barrier records used by the mapping functions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class PipelineStageFlags(enum.IntFlag):
    """Pipeline stages an execution dependency can refer to."""

    TOP_OF_PIPE = 0x0000_0001
    DRAW_INDIRECT = 0x0000_0002
    VERTEX_INPUT = 0x0000_0004
    VERTEX_SHADER = 0x0000_0008
    TESSELLATION_CONTROL_SHADER = 0x0000_0010
    TESSELLATION_EVALUATION_SHADER = 0x0000_0020
    GEOMETRY_SHADER = 0x0000_0040
    FRAGMENT_SHADER = 0x0000_0080
    EARLY_FRAGMENT_TESTS = 0x0000_0100
    LATE_FRAGMENT_TESTS = 0x0000_0200
    COLOR_ATTACHMENT_OUTPUT = 0x0000_0400
    COMPUTE_SHADER = 0x0000_0800
    TRANSFER = 0x0000_1000
    BOTTOM_OF_PIPE = 0x0000_2000
    HOST = 0x0000_4000
    ALL_GRAPHICS = 0x0000_8000
    ALL_COMMANDS = 0x0001_0000
    COMMAND_PREPROCESS_NV = 0x0002_0000
    RAY_TRACING_SHADER_KHR = 0x0020_0000
    ACCELERATION_STRUCTURE_BUILD_KHR = 0x0200_0000


class AccessFlags(enum.IntFlag):
    """Memory access types a memory dependency can refer to."""

    INDIRECT_COMMAND_READ = 0x0000_0001
    INDEX_READ = 0x0000_0002
    VERTEX_ATTRIBUTE_READ = 0x0000_0004
    UNIFORM_READ = 0x0000_0008
    INPUT_ATTACHMENT_READ = 0x0000_0010
    SHADER_READ = 0x0000_0020
    SHADER_WRITE = 0x0000_0040
    COLOR_ATTACHMENT_READ = 0x0000_0080
    COLOR_ATTACHMENT_WRITE = 0x0000_0100
    DEPTH_STENCIL_ATTACHMENT_READ = 0x0000_0200
    DEPTH_STENCIL_ATTACHMENT_WRITE = 0x0000_0400
    TRANSFER_READ = 0x0000_0800
    TRANSFER_WRITE = 0x0000_1000
    HOST_READ = 0x0000_2000
    HOST_WRITE = 0x0000_4000
    MEMORY_READ = 0x0000_8000
    MEMORY_WRITE = 0x0001_0000
    COMMAND_PREPROCESS_READ_NV = 0x0002_0000
    COMMAND_PREPROCESS_WRITE_NV = 0x0004_0000
    ACCELERATION_STRUCTURE_READ_KHR = 0x0020_0000
    ACCELERATION_STRUCTURE_WRITE_KHR = 0x0040_0000


class ImageAspectFlags(enum.IntFlag):
    """Aspects of an image included in a subresource range."""

    COLOR = 0x1
    DEPTH = 0x2
    STENCIL = 0x4
    METADATA = 0x8


class DependencyFlags(enum.IntFlag):
    """Options for how an execution and memory dependency is formed."""

    BY_REGION = 0x1
    VIEW_LOCAL = 0x2
    DEVICE_GROUP = 0x4


class ImageLayout(enum.IntEnum):
    """Native Vulkan image layouts."""

    UNDEFINED = 0
    GENERAL = 1
    COLOR_ATTACHMENT_OPTIMAL = 2
    DEPTH_STENCIL_ATTACHMENT_OPTIMAL = 3
    DEPTH_STENCIL_READ_ONLY_OPTIMAL = 4
    SHADER_READ_ONLY_OPTIMAL = 5
    TRANSFER_SRC_OPTIMAL = 6
    TRANSFER_DST_OPTIMAL = 7
    PREINITIALIZED = 8
    PRESENT_SRC_KHR = 1000001002
    SHARED_PRESENT_KHR = 1000111000
    DEPTH_READ_ONLY_STENCIL_ATTACHMENT_OPTIMAL = 1000117000
    DEPTH_ATTACHMENT_STENCIL_READ_ONLY_OPTIMAL = 1000117001


@dataclass(frozen=True)
class ImageSubresourceRange:
    """A range of mip levels and array layers of an image."""

    aspect_mask: ImageAspectFlags = ImageAspectFlags(0)
    base_mip_level: int = 0
    level_count: int = 0
    base_array_layer: int = 0
    layer_count: int = 0


@dataclass
class MemoryBarrier:
    """A global memory barrier."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)


@dataclass
class BufferMemoryBarrier:
    """A memory barrier over a range of one buffer."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    buffer: int = 0
    offset: int = 0
    size: int = 0


@dataclass
class ImageMemoryBarrier:
    """A memory barrier over a subresource range of one image, with a layout transition."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)
    old_layout: ImageLayout = ImageLayout.UNDEFINED
    new_layout: ImageLayout = ImageLayout.UNDEFINED
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    image: int = 0
    subresource_range: ImageSubresourceRange = field(default_factory=ImageSubresourceRange)