import dataclasses

import pytest

from vksync import vk


def _is_single_bit(value):
    return value > 0 and value & (value - 1) == 0


@pytest.mark.parametrize(
    "flag_type",
    [vk.PipelineStageFlags, vk.AccessFlags, vk.ImageAspectFlags, vk.DependencyFlags],
)
def test_flag_members_are_distinct_single_bits(flag_type):
    values = [member.value for member in flag_type.__members__.values()]
    assert all(_is_single_bit(v) for v in values)
    assert len(set(values)) == len(values)


def test_stage_combination_contains_its_parts():
    early = vk.PipelineStageFlags.EARLY_FRAGMENT_TESTS
    late = vk.PipelineStageFlags.LATE_FRAGMENT_TESTS
    combined = vk.PipelineStageFlags(early.value | late.value)
    assert combined == early | late
    assert early in combined
    assert late in combined
    assert vk.PipelineStageFlags.COMPUTE_SHADER not in combined


def test_empty_flags_are_falsy():
    assert not vk.AccessFlags(0)
    assert not vk.PipelineStageFlags(0)
    assert vk.AccessFlags.SHADER_READ


def test_image_layout_pinned_values():
    assert vk.ImageLayout(0) is vk.ImageLayout.UNDEFINED
    assert vk.ImageLayout(1000001002) is vk.ImageLayout.PRESENT_SRC_KHR


def test_image_layout_values_are_unique():
    values = [member.value for member in vk.ImageLayout.__members__.values()]
    assert len(set(values)) == len(values)


def test_memory_barrier_defaults_are_empty():
    barrier = vk.MemoryBarrier()
    assert not barrier.src_access_mask
    assert not barrier.dst_access_mask


def test_memory_barrier_masks_accumulate():
    barrier = vk.MemoryBarrier()
    barrier.src_access_mask |= vk.AccessFlags.SHADER_WRITE
    barrier.src_access_mask |= vk.AccessFlags.TRANSFER_WRITE
    assert barrier.src_access_mask == vk.AccessFlags.SHADER_WRITE | vk.AccessFlags.TRANSFER_WRITE
    assert not barrier.dst_access_mask


def test_buffer_memory_barrier_keeps_fields():
    barrier = vk.BufferMemoryBarrier(
        src_queue_family_index=2, dst_queue_family_index=5, buffer=7, offset=64, size=256
    )
    assert (barrier.buffer, barrier.offset, barrier.size) == (7, 64, 256)
    assert (barrier.src_queue_family_index, barrier.dst_queue_family_index) == (2, 5)
    assert not barrier.src_access_mask


def test_image_memory_barrier_defaults():
    barrier = vk.ImageMemoryBarrier()
    assert barrier.old_layout is vk.ImageLayout.UNDEFINED
    assert barrier.new_layout is vk.ImageLayout.UNDEFINED
    assert barrier.subresource_range == vk.ImageSubresourceRange()


def test_image_memory_barriers_do_not_share_ranges():
    first = vk.ImageMemoryBarrier()
    second = vk.ImageMemoryBarrier()
    first.subresource_range = vk.ImageSubresourceRange(level_count=1, layer_count=1)
    assert second.subresource_range == vk.ImageSubresourceRange()


def test_subresource_range_is_immutable_and_replaceable():
    rng = vk.ImageSubresourceRange(aspect_mask=vk.ImageAspectFlags.COLOR, level_count=1, layer_count=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rng.level_count = 4
    changed = dataclasses.replace(rng, base_mip_level=2)
    assert changed.base_mip_level == 2
    assert changed.aspect_mask == rng.aspect_mask
    assert rng.base_mip_level == 0