"""Blocs image — Image (lien optionnel) et Avatar."""
from typing import Literal, Optional
from .base import BaseBlock, BlockData, BlockProps


class ImageProps(BlockProps):
    url: str = ""
    alt: str = ""
    link_href: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    content_alignment: Optional[Literal["top", "middle", "bottom"]] = None


class ImageData(BlockData):
    props: ImageProps = ImageProps()


class ImageBlock(BaseBlock):
    type: Literal["Image"] = "Image"
    data: ImageData = ImageData()


class AvatarProps(BlockProps):
    image_url: str = ""
    alt: Optional[str] = None
    size: Optional[int] = None
    shape: Optional[Literal["circle", "square", "rounded"]] = None


class AvatarData(BlockData):
    props: AvatarProps = AvatarProps()


class AvatarBlock(BaseBlock):
    type: Literal["Avatar"] = "Avatar"
    data: AvatarData = AvatarData()
