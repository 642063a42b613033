"""Blocs conteneurs — Container (liste ordonnée d'enfants) et ColumnsContainer."""
from typing import List, Literal, Optional
from pydantic import Field

from .base import BaseBlock, BlockData, BlockProps, WireModel


class ContainerProps(BlockProps):
    children_ids: List[str] = Field(default_factory=list)


class ContainerData(BlockData):
    props: ContainerProps = ContainerProps()


class ContainerBlock(BaseBlock):
    type: Literal["Container"] = "Container"
    data: ContainerData = ContainerData()


class Column(WireModel):
    children_ids: List[str] = Field(default_factory=list)


class ColumnsContainerProps(BlockProps):
    columns_count: Literal[2, 3] = 2
    columns_gap: Optional[int] = None
    content_alignment: Optional[Literal["top", "middle", "bottom"]] = None
    columns: List[Column] = Field(default_factory=list)


class ColumnsContainerData(BlockData):
    props: ColumnsContainerProps = ColumnsContainerProps()


class ColumnsContainerBlock(BaseBlock):
    type: Literal["ColumnsContainer"] = "ColumnsContainer"
    data: ColumnsContainerData = ColumnsContainerData()
