import pytest

from vksync import vk
from vksync.access import AccessInfo, AccessType, get_access_info, is_write_access


def test_every_access_type_has_info():
    stageless = {AccessType.NOTHING, AccessType.PRESENT}
    for access in AccessType:
        info = get_access_info(access)
        assert info == get_access_info(access)
        if access in stageless:
            assert not info.stage_mask
            assert not info.access_mask
        else:
            assert info.stage_mask
            assert info.access_mask


def test_nothing_maps_to_empty():
    info = get_access_info(AccessType.NOTHING)
    assert not info.stage_mask
    assert not info.access_mask
    assert info.image_layout is vk.ImageLayout.UNDEFINED


def test_present_has_no_stages_but_present_layout():
    info = get_access_info(AccessType.PRESENT)
    assert not info.stage_mask
    assert not info.access_mask
    assert info.image_layout is vk.ImageLayout.PRESENT_SRC_KHR


def test_compute_shader_write():
    info = get_access_info(AccessType.COMPUTE_SHADER_WRITE)
    assert info == AccessInfo(
        vk.PipelineStageFlags.COMPUTE_SHADER, vk.AccessFlags.SHADER_WRITE, vk.ImageLayout.GENERAL
    )


def test_fragment_sampled_read():
    info = get_access_info(AccessType.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER)
    assert info.stage_mask == vk.PipelineStageFlags.FRAGMENT_SHADER
    assert info.access_mask == vk.AccessFlags.SHADER_READ
    assert info.image_layout is vk.ImageLayout.SHADER_READ_ONLY_OPTIMAL


def test_depth_stencil_write_spans_both_fragment_test_stages():
    info = get_access_info(AccessType.DEPTH_STENCIL_ATTACHMENT_WRITE)
    assert info.stage_mask == (
        vk.PipelineStageFlags.EARLY_FRAGMENT_TESTS | vk.PipelineStageFlags.LATE_FRAGMENT_TESTS
    )
    assert info.access_mask == vk.AccessFlags.DEPTH_STENCIL_ATTACHMENT_WRITE
    assert info.image_layout is vk.ImageLayout.DEPTH_STENCIL_ATTACHMENT_OPTIMAL


def test_general_covers_all_memory():
    info = get_access_info(AccessType.GENERAL)
    assert info.stage_mask == vk.PipelineStageFlags.ALL_COMMANDS
    assert info.access_mask == vk.AccessFlags.MEMORY_READ | vk.AccessFlags.MEMORY_WRITE


def test_transfer_layouts():
    assert get_access_info(AccessType.TRANSFER_READ).image_layout is vk.ImageLayout.TRANSFER_SRC_OPTIMAL
    assert get_access_info(AccessType.TRANSFER_WRITE).image_layout is vk.ImageLayout.TRANSFER_DST_OPTIMAL


@pytest.mark.parametrize(
    "access",
    [
        AccessType.COMPUTE_SHADER_WRITE,
        AccessType.COLOR_ATTACHMENT_WRITE,
        AccessType.TRANSFER_WRITE,
        AccessType.HOST_WRITE,
        AccessType.COLOR_ATTACHMENT_READ_WRITE,
        AccessType.GENERAL,
        AccessType.COMMAND_BUFFER_WRITE_NVX,
    ],
)
def test_write_accesses(access):
    assert is_write_access(access) is True


@pytest.mark.parametrize(
    "access",
    [
        AccessType.NOTHING,
        AccessType.PRESENT,
        AccessType.COMPUTE_SHADER_READ_OTHER,
        AccessType.INDEX_BUFFER,
        AccessType.TRANSFER_READ,
        AccessType.ACCELERATION_STRUCTURE_BUILD_WRITE,
        AccessType.ACCELERATION_STRUCTURE_BUFFER_WRITE,
    ],
)
def test_non_write_accesses(access):
    assert is_write_access(access) is False


def test_every_write_access_has_an_access_mask():
    writes = [access for access in AccessType if is_write_access(access)]
    assert writes
    assert all(get_access_info(access).access_mask for access in writes)


def test_unknown_access_type_raises():
    with pytest.raises(ValueError):
        get_access_info("COMPUTE_SHADER_WRITE")
    with pytest.raises(ValueError):
        is_write_access("COMPUTE_SHADER_WRITE")