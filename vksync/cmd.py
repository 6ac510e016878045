"""Recording of pipeline barriers and events on a command buffer.

The ``device`` passed to these functions is any object offering the command
recording methods ``cmd_pipeline_barrier``, ``cmd_set_event``,
``cmd_reset_event`` and ``cmd_wait_events``. Each takes the same arguments,
in the same order, as the matching Vulkan command.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from . import vk
from .access import AccessType, get_access_info
from .barriers import (
    BufferBarrier,
    GlobalBarrier,
    ImageBarrier,
    get_buffer_memory_barrier,
    get_image_memory_barrier,
    get_memory_barrier,
)


class Device(Protocol):
    """Command recording interface that the functions in this module drive."""

    def cmd_pipeline_barrier(
        self,
        command_buffer: Any,
        src_stage_mask: vk.PipelineStageFlags,
        dst_stage_mask: vk.PipelineStageFlags,
        dependency_flags: vk.DependencyFlags,
        memory_barriers: Sequence[vk.MemoryBarrier],
        buffer_memory_barriers: Sequence[vk.BufferMemoryBarrier],
        image_memory_barriers: Sequence[vk.ImageMemoryBarrier],
    ) -> Any: ...

    def cmd_set_event(
        self, command_buffer: Any, event: Any, stage_mask: vk.PipelineStageFlags
    ) -> Any: ...

    def cmd_reset_event(
        self, command_buffer: Any, event: Any, stage_mask: vk.PipelineStageFlags
    ) -> Any: ...

    def cmd_wait_events(
        self,
        command_buffer: Any,
        events: Sequence[Any],
        src_stage_mask: vk.PipelineStageFlags,
        dst_stage_mask: vk.PipelineStageFlags,
        memory_barriers: Sequence[vk.MemoryBarrier],
        buffer_memory_barriers: Sequence[vk.BufferMemoryBarrier],
        image_memory_barriers: Sequence[vk.ImageMemoryBarrier],
    ) -> Any: ...


@dataclass
class _Translated:
    src_stage_mask: vk.PipelineStageFlags = vk.PipelineStageFlags.TOP_OF_PIPE
    dst_stage_mask: vk.PipelineStageFlags = vk.PipelineStageFlags.BOTTOM_OF_PIPE
    memory_barriers: list[vk.MemoryBarrier] = field(default_factory=list)
    buffer_barriers: list[vk.BufferMemoryBarrier] = field(default_factory=list)
    image_barriers: list[vk.ImageMemoryBarrier] = field(default_factory=list)

    def add(self, src, dst, barrier, target: list) -> None:
        self.src_stage_mask |= src
        self.dst_stage_mask |= dst
        target.append(barrier)


def _translate(
    global_barrier: GlobalBarrier | None,
    buffer_barriers: Iterable[BufferBarrier],
    image_barriers: Iterable[ImageBarrier],
) -> _Translated:
    """Translate all barrier descriptions, merging their stage masks."""
    result = _Translated()
    if global_barrier is not None:
        result.add(*get_memory_barrier(global_barrier), result.memory_barriers)
    for barrier in buffer_barriers:
        result.add(*get_buffer_memory_barrier(barrier), result.buffer_barriers)
    for barrier in image_barriers:
        result.add(*get_image_memory_barrier(barrier), result.image_barriers)
    return result


def _stage_mask(previous_accesses: Iterable[AccessType]) -> vk.PipelineStageFlags:
    mask = vk.PipelineStageFlags.TOP_OF_PIPE
    for access in previous_accesses:
        mask |= get_access_info(access).stage_mask
    return mask


def pipeline_barrier(
    device, command_buffer, global_barrier=None, buffer_barriers=(), image_barriers=()
):
    """Record a pipeline barrier built from the given barrier descriptions."""
    t = _translate(global_barrier, buffer_barriers, image_barriers)
    return device.cmd_pipeline_barrier(
        command_buffer,
        t.src_stage_mask,
        t.dst_stage_mask,
        vk.DependencyFlags(0),
        t.memory_barriers,
        t.buffer_barriers,
        t.image_barriers,
    )


def set_event(device, command_buffer, event, previous_accesses=()):
    """Record setting ``event`` once the given previous accesses have completed."""
    return device.cmd_set_event(command_buffer, event, _stage_mask(previous_accesses))


def reset_event(device, command_buffer, event, previous_accesses=()):
    """Record resetting ``event`` once the given previous accesses have completed."""
    return device.cmd_reset_event(command_buffer, event, _stage_mask(previous_accesses))


def wait_events(
    device,
    command_buffer,
    events,
    global_barrier=None,
    buffer_barriers=(),
    image_barriers=(),
):
    """Record a wait on ``events`` with barriers built from the given descriptions."""
    t = _translate(global_barrier, buffer_barriers, image_barriers)
    return device.cmd_wait_events(
        command_buffer,
        list(events),
        t.src_stage_mask,
        t.dst_stage_mask,
        t.memory_barriers,
        t.buffer_barriers,
        t.image_barriers,
    )