# vksync

Vulkan synchronization made simpler. You say what a resource was used for
and what it will be used for next. `vksync` then works out the pipeline
stages, access masks and image layouts that the barrier needs.

Vulkan has many enums and bit flags, and a lot of their combinations are
invalid or meaningless. `vksync` replaces them with a short list of usage
types (`vksync.access.AccessType`) and three image layout choices
(`vksync.access.ImageLayout`).

The package has four modules:

- `vksync.vk`: the Vulkan values that the mapping produces. It holds the flag
  sets `PipelineStageFlags`, `AccessFlags`, `ImageAspectFlags` and
  `DependencyFlags`, the native `ImageLayout` enum, and the records
  `ImageSubresourceRange`, `MemoryBarrier`, `BufferMemoryBarrier` and
  `ImageMemoryBarrier`.
- `vksync.access`: the `AccessType` and `ImageLayout` enums and the
  `AccessInfo` record. `get_access_info(access_type)` returns the stage mask,
  access mask and optimal native layout for an access type.
  `is_write_access(access_type)` tells whether that access writes to the
  resource. Both raise `ValueError` when given anything that is not an
  `AccessType`.
- `vksync.barriers`: the barrier descriptions `GlobalBarrier`,
  `BufferBarrier` and `ImageBarrier`, and the functions that translate them.
- `vksync.cmd`: records barriers and events through a device object.

## Global barriers

```python
from vksync.access import AccessType
from vksync.barriers import GlobalBarrier, get_memory_barrier
from vksync.vk import AccessFlags, PipelineStageFlags

barrier = GlobalBarrier(
    previous_accesses=[AccessType.COMPUTE_SHADER_WRITE],
    next_accesses=[AccessType.INDEX_BUFFER],
)
src_stages, dst_stages, memory_barrier = get_memory_barrier(barrier)

assert src_stages == PipelineStageFlags.COMPUTE_SHADER
assert dst_stages == PipelineStageFlags.VERTEX_INPUT
assert memory_barrier.src_access_mask == AccessFlags.SHADER_WRITE
assert memory_barrier.dst_access_mask == AccessFlags.INDEX_READ
```

Only write accesses contribute to the source access mask. When no previous
access writes, the destination access mask stays empty as well. If no stage
is determined, the source stage mask falls back to `TOP_OF_PIPE` and the
destination stage mask falls back to `BOTTOM_OF_PIPE`.

## Image barriers

Use an image barrier when an image needs a layout transition or a change of
queue family ownership.

```python
from vksync import vk
from vksync.access import AccessType, ImageLayout
from vksync.barriers import ImageBarrier, get_image_memory_barrier

barrier = ImageBarrier(
    previous_accesses=[AccessType.COLOR_ATTACHMENT_WRITE],
    next_accesses=[AccessType.PRESENT],
    previous_layout=ImageLayout.OPTIMAL,
    next_layout=ImageLayout.OPTIMAL,
)
src_stages, dst_stages, image_barrier = get_image_memory_barrier(barrier)

assert image_barrier.old_layout == vk.ImageLayout.COLOR_ATTACHMENT_OPTIMAL
assert image_barrier.new_layout == vk.ImageLayout.PRESENT_SRC_KHR
```

How each layout choice maps to a native layout:

- `ImageLayout.OPTIMAL` uses the optimal layout for each access.
- `ImageLayout.GENERAL` uses `GENERAL`. For `AccessType.PRESENT` it uses
  `PRESENT_SRC_KHR` instead.

With `discard_contents=True`, the old layout is `UNDEFINED`, so the image's
current contents are not preserved.

Buffer barriers (`BufferBarrier` with `get_buffer_memory_barrier`) work the
same way as global barriers. They also carry the queue family indices, the
buffer handle, the offset and the size into the resulting
`BufferMemoryBarrier`.

## Recording commands

`vksync.cmd` combines any number of barriers into a single call on a device
object:

- `pipeline_barrier(device, command_buffer, global_barrier=None, buffer_barriers=(), image_barriers=())`
- `set_event(device, command_buffer, event, previous_accesses=())`
- `reset_event(device, command_buffer, event, previous_accesses=())`
- `wait_events(device, command_buffer, events, global_barrier=None, buffer_barriers=(), image_barriers=())`

The device can be any object that provides the methods `cmd_pipeline_barrier`,
`cmd_set_event`, `cmd_reset_event` and `cmd_wait_events`. Each method takes
the same arguments, in the same order, as the matching Vulkan command. The
`vksync.cmd.Device` protocol describes this interface. `command_buffer`,
`event` and `events` are passed through unchanged. Each function returns
whatever the device method returns.

## What the package does not do

- `vksync` does not talk to a Vulkan driver. It computes stage masks and
  barrier records. Submitting them is the job of the device object you supply.
- The `ImageLayout.GENERAL_AND_PRESENTATION` choice is not supported. Using
  it in an image barrier raises `ValueError`.
- Semaphores, fences and render passes are out of scope.

## Tests

The `test` extra installs pytest, which runs the test suite.