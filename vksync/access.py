"""Simplified resource access types and their mapping to Vulkan stages, accesses and layouts."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from . import vk


class AccessType(enum.Enum):
    """Every way a resource can be used."""

    NOTHING = enum.auto()
    COMMAND_BUFFER_READ_NVX = enum.auto()
    INDIRECT_BUFFER = enum.auto()
    INDEX_BUFFER = enum.auto()
    VERTEX_BUFFER = enum.auto()
    VERTEX_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    VERTEX_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    VERTEX_SHADER_READ_OTHER = enum.auto()
    TESSELLATION_CONTROL_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    TESSELLATION_CONTROL_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    TESSELLATION_CONTROL_SHADER_READ_OTHER = enum.auto()
    TESSELLATION_EVALUATION_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    TESSELLATION_EVALUATION_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    TESSELLATION_EVALUATION_SHADER_READ_OTHER = enum.auto()
    GEOMETRY_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    GEOMETRY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    GEOMETRY_SHADER_READ_OTHER = enum.auto()
    FRAGMENT_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    FRAGMENT_SHADER_READ_COLOR_INPUT_ATTACHMENT = enum.auto()
    FRAGMENT_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT = enum.auto()
    FRAGMENT_SHADER_READ_OTHER = enum.auto()
    COLOR_ATTACHMENT_READ = enum.auto()
    DEPTH_STENCIL_ATTACHMENT_READ = enum.auto()
    COMPUTE_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    COMPUTE_SHADER_READ_OTHER = enum.auto()
    ANY_SHADER_READ_UNIFORM_BUFFER = enum.auto()
    ANY_SHADER_READ_UNIFORM_BUFFER_OR_VERTEX_BUFFER = enum.auto()
    ANY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    ANY_SHADER_READ_OTHER = enum.auto()
    TRANSFER_READ = enum.auto()
    HOST_READ = enum.auto()
    PRESENT = enum.auto()
    COMMAND_BUFFER_WRITE_NVX = enum.auto()
    VERTEX_SHADER_WRITE = enum.auto()
    TESSELLATION_CONTROL_SHADER_WRITE = enum.auto()
    TESSELLATION_EVALUATION_SHADER_WRITE = enum.auto()
    GEOMETRY_SHADER_WRITE = enum.auto()
    FRAGMENT_SHADER_WRITE = enum.auto()
    COLOR_ATTACHMENT_WRITE = enum.auto()
    DEPTH_STENCIL_ATTACHMENT_WRITE = enum.auto()
    DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY = enum.auto()
    STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY = enum.auto()
    COMPUTE_SHADER_WRITE = enum.auto()
    ANY_SHADER_WRITE = enum.auto()
    TRANSFER_WRITE = enum.auto()
    HOST_WRITE = enum.auto()
    COLOR_ATTACHMENT_READ_WRITE = enum.auto()
    GENERAL = enum.auto()
    RAY_TRACING_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = enum.auto()
    RAY_TRACING_SHADER_READ_COLOR_INPUT_ATTACHMENT = enum.auto()
    RAY_TRACING_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT = enum.auto()
    RAY_TRACING_SHADER_READ_ACCELERATION_STRUCTURE = enum.auto()
    RAY_TRACING_SHADER_READ_OTHER = enum.auto()
    ACCELERATION_STRUCTURE_BUILD_WRITE = enum.auto()
    ACCELERATION_STRUCTURE_BUILD_READ = enum.auto()
    ACCELERATION_STRUCTURE_BUFFER_WRITE = enum.auto()


class ImageLayout(enum.Enum):
    """Reduced set of image layout choices; OPTIMAL is usually preferred."""

    OPTIMAL = enum.auto()
    GENERAL = enum.auto()
    GENERAL_AND_PRESENTATION = enum.auto()


@dataclass(frozen=True)
class AccessInfo:
    """Pipeline stages, access flags and optimal image layout for one access type."""

    stage_mask: vk.PipelineStageFlags
    access_mask: vk.AccessFlags
    image_layout: vk.ImageLayout


_S = vk.PipelineStageFlags
_A = vk.AccessFlags
_L = vk.ImageLayout
_T = AccessType

_FRAGMENT_TESTS = _S.EARLY_FRAGMENT_TESTS | _S.LATE_FRAGMENT_TESTS
_DEPTH_STENCIL_RW = _A.DEPTH_STENCIL_ATTACHMENT_WRITE | _A.DEPTH_STENCIL_ATTACHMENT_READ

_ACCESS_INFO = {
    access: AccessInfo(stage, mask, layout)
    for access, stage, mask, layout in (
        (_T.NOTHING, _S(0), _A(0), _L.UNDEFINED),
        (_T.COMMAND_BUFFER_READ_NVX, _S.COMMAND_PREPROCESS_NV, _A.COMMAND_PREPROCESS_READ_NV, _L.UNDEFINED),
        (_T.INDIRECT_BUFFER, _S.DRAW_INDIRECT, _A.INDIRECT_COMMAND_READ, _L.UNDEFINED),
        (_T.INDEX_BUFFER, _S.VERTEX_INPUT, _A.INDEX_READ, _L.UNDEFINED),
        (_T.VERTEX_BUFFER, _S.VERTEX_INPUT, _A.VERTEX_ATTRIBUTE_READ, _L.UNDEFINED),
        (_T.VERTEX_SHADER_READ_UNIFORM_BUFFER, _S.VERTEX_SHADER, _A.SHADER_READ, _L.UNDEFINED),
        (
            _T.VERTEX_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.VERTEX_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (_T.VERTEX_SHADER_READ_OTHER, _S.VERTEX_SHADER, _A.SHADER_READ, _L.GENERAL),
        (
            _T.TESSELLATION_CONTROL_SHADER_READ_UNIFORM_BUFFER,
            _S.TESSELLATION_CONTROL_SHADER,
            _A.UNIFORM_READ,
            _L.UNDEFINED,
        ),
        (
            _T.TESSELLATION_CONTROL_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.TESSELLATION_CONTROL_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (_T.TESSELLATION_CONTROL_SHADER_READ_OTHER, _S.TESSELLATION_CONTROL_SHADER, _A.SHADER_READ, _L.GENERAL),
        (
            _T.TESSELLATION_EVALUATION_SHADER_READ_UNIFORM_BUFFER,
            _S.TESSELLATION_EVALUATION_SHADER,
            _A.UNIFORM_READ,
            _L.UNDEFINED,
        ),
        (
            _T.TESSELLATION_EVALUATION_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.TESSELLATION_EVALUATION_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (
            _T.TESSELLATION_EVALUATION_SHADER_READ_OTHER,
            _S.TESSELLATION_EVALUATION_SHADER,
            _A.SHADER_READ,
            _L.GENERAL,
        ),
        (_T.GEOMETRY_SHADER_READ_UNIFORM_BUFFER, _S.GEOMETRY_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        (
            _T.GEOMETRY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.GEOMETRY_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (_T.GEOMETRY_SHADER_READ_OTHER, _S.GEOMETRY_SHADER, _A.SHADER_READ, _L.GENERAL),
        (_T.FRAGMENT_SHADER_READ_UNIFORM_BUFFER, _S.FRAGMENT_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        (
            _T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.FRAGMENT_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (
            _T.FRAGMENT_SHADER_READ_COLOR_INPUT_ATTACHMENT,
            _S.FRAGMENT_SHADER,
            _A.INPUT_ATTACHMENT_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (
            _T.FRAGMENT_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT,
            _S.FRAGMENT_SHADER,
            _A.INPUT_ATTACHMENT_READ,
            _L.DEPTH_STENCIL_READ_ONLY_OPTIMAL,
        ),
        (_T.FRAGMENT_SHADER_READ_OTHER, _S.FRAGMENT_SHADER, _A.SHADER_READ, _L.GENERAL),
        (
            _T.COLOR_ATTACHMENT_READ,
            _S.COLOR_ATTACHMENT_OUTPUT,
            _A.COLOR_ATTACHMENT_READ,
            _L.COLOR_ATTACHMENT_OPTIMAL,
        ),
        (
            _T.DEPTH_STENCIL_ATTACHMENT_READ,
            _FRAGMENT_TESTS,
            _A.DEPTH_STENCIL_ATTACHMENT_READ,
            _L.DEPTH_STENCIL_READ_ONLY_OPTIMAL,
        ),
        (_T.COMPUTE_SHADER_READ_UNIFORM_BUFFER, _S.COMPUTE_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        (
            _T.COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.COMPUTE_SHADER,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (_T.COMPUTE_SHADER_READ_OTHER, _S.COMPUTE_SHADER, _A.SHADER_READ, _L.GENERAL),
        (_T.ANY_SHADER_READ_UNIFORM_BUFFER, _S.ALL_COMMANDS, _A.UNIFORM_READ, _L.UNDEFINED),
        (
            _T.ANY_SHADER_READ_UNIFORM_BUFFER_OR_VERTEX_BUFFER,
            _S.ALL_COMMANDS,
            _A.UNIFORM_READ | _A.VERTEX_ATTRIBUTE_READ,
            _L.UNDEFINED,
        ),
        (
            _T.ANY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.ALL_COMMANDS,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (_T.ANY_SHADER_READ_OTHER, _S.ALL_COMMANDS, _A.SHADER_READ, _L.GENERAL),
        (_T.TRANSFER_READ, _S.TRANSFER, _A.TRANSFER_READ, _L.TRANSFER_SRC_OPTIMAL),
        (_T.HOST_READ, _S.HOST, _A.HOST_READ, _L.GENERAL),
        (_T.PRESENT, _S(0), _A(0), _L.PRESENT_SRC_KHR),
        (_T.COMMAND_BUFFER_WRITE_NVX, _S.COMMAND_PREPROCESS_NV, _A.COMMAND_PREPROCESS_WRITE_NV, _L.UNDEFINED),
        (_T.VERTEX_SHADER_WRITE, _S.VERTEX_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        (_T.TESSELLATION_CONTROL_SHADER_WRITE, _S.TESSELLATION_CONTROL_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        (
            _T.TESSELLATION_EVALUATION_SHADER_WRITE,
            _S.TESSELLATION_EVALUATION_SHADER,
            _A.SHADER_WRITE,
            _L.GENERAL,
        ),
        (_T.GEOMETRY_SHADER_WRITE, _S.GEOMETRY_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        (_T.FRAGMENT_SHADER_WRITE, _S.FRAGMENT_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        (
            _T.COLOR_ATTACHMENT_WRITE,
            _S.COLOR_ATTACHMENT_OUTPUT,
            _A.COLOR_ATTACHMENT_WRITE,
            _L.COLOR_ATTACHMENT_OPTIMAL,
        ),
        (
            _T.DEPTH_STENCIL_ATTACHMENT_WRITE,
            _FRAGMENT_TESTS,
            _A.DEPTH_STENCIL_ATTACHMENT_WRITE,
            _L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL,
        ),
        (
            _T.DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY,
            _FRAGMENT_TESTS,
            _DEPTH_STENCIL_RW,
            _L.DEPTH_ATTACHMENT_STENCIL_READ_ONLY_OPTIMAL,
        ),
        (
            _T.STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY,
            _FRAGMENT_TESTS,
            _DEPTH_STENCIL_RW,
            _L.DEPTH_READ_ONLY_STENCIL_ATTACHMENT_OPTIMAL,
        ),
        (_T.COMPUTE_SHADER_WRITE, _S.COMPUTE_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        (_T.ANY_SHADER_WRITE, _S.ALL_COMMANDS, _A.SHADER_WRITE, _L.GENERAL),
        (_T.TRANSFER_WRITE, _S.TRANSFER, _A.TRANSFER_WRITE, _L.TRANSFER_DST_OPTIMAL),
        (_T.HOST_WRITE, _S.HOST, _A.HOST_WRITE, _L.GENERAL),
        (
            _T.COLOR_ATTACHMENT_READ_WRITE,
            _S.COLOR_ATTACHMENT_OUTPUT,
            _A.COLOR_ATTACHMENT_READ | _A.COLOR_ATTACHMENT_WRITE,
            _L.COLOR_ATTACHMENT_OPTIMAL,
        ),
        (_T.GENERAL, _S.ALL_COMMANDS, _A.MEMORY_READ | _A.MEMORY_WRITE, _L.GENERAL),
        (
            _T.RAY_TRACING_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
            _S.RAY_TRACING_SHADER_KHR,
            _A.SHADER_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (
            _T.RAY_TRACING_SHADER_READ_COLOR_INPUT_ATTACHMENT,
            _S.RAY_TRACING_SHADER_KHR,
            _A.INPUT_ATTACHMENT_READ,
            _L.SHADER_READ_ONLY_OPTIMAL,
        ),
        (
            _T.RAY_TRACING_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT,
            _S.RAY_TRACING_SHADER_KHR,
            _A.INPUT_ATTACHMENT_READ,
            _L.DEPTH_STENCIL_READ_ONLY_OPTIMAL,
        ),
        (
            _T.RAY_TRACING_SHADER_READ_ACCELERATION_STRUCTURE,
            _S.RAY_TRACING_SHADER_KHR,
            _A.ACCELERATION_STRUCTURE_READ_KHR,
            _L.UNDEFINED,
        ),
        (_T.RAY_TRACING_SHADER_READ_OTHER, _S.RAY_TRACING_SHADER_KHR, _A.SHADER_READ, _L.GENERAL),
        (
            _T.ACCELERATION_STRUCTURE_BUILD_WRITE,
            _S.ACCELERATION_STRUCTURE_BUILD_KHR,
            _A.ACCELERATION_STRUCTURE_WRITE_KHR,
            _L.UNDEFINED,
        ),
        (
            _T.ACCELERATION_STRUCTURE_BUILD_READ,
            _S.ACCELERATION_STRUCTURE_BUILD_KHR,
            _A.ACCELERATION_STRUCTURE_READ_KHR,
            _L.UNDEFINED,
        ),
        (
            _T.ACCELERATION_STRUCTURE_BUFFER_WRITE,
            _S.ACCELERATION_STRUCTURE_BUILD_KHR,
            _A.TRANSFER_WRITE,
            _L.UNDEFINED,
        ),
    )
}

_WRITE_ACCESSES = frozenset(
    {
        _T.COMMAND_BUFFER_WRITE_NVX,
        _T.VERTEX_SHADER_WRITE,
        _T.TESSELLATION_CONTROL_SHADER_WRITE,
        _T.TESSELLATION_EVALUATION_SHADER_WRITE,
        _T.GEOMETRY_SHADER_WRITE,
        _T.FRAGMENT_SHADER_WRITE,
        _T.COLOR_ATTACHMENT_WRITE,
        _T.DEPTH_STENCIL_ATTACHMENT_WRITE,
        _T.DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY,
        _T.STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY,
        _T.COMPUTE_SHADER_WRITE,
        _T.ANY_SHADER_WRITE,
        _T.TRANSFER_WRITE,
        _T.HOST_WRITE,
        _T.COLOR_ATTACHMENT_READ_WRITE,
        _T.GENERAL,
    }
)


def get_access_info(access_type):
    """Return the stages, access flags and optimal layout for an access type."""
    try:
        return _ACCESS_INFO[access_type]
    except (KeyError, TypeError):
        raise ValueError(f"unknown access type: {access_type!r}") from None


def is_write_access(access_type):
    """Tell whether an access type writes to the resource."""
    if not isinstance(access_type, AccessType):
        raise ValueError(f"unknown access type: {access_type!r}")
    return access_type in _WRITE_ACCESSES