"""Simplified Vulkan synchronization: pipeline barriers and events described as access types."""

__version__ = "0.1.6"
__all__ = ["access", "barriers", "cmd", "vk"]