"""Core data structures: label type, label objects and the label map."""

from labelmap.core.label_type import LabelType
from labelmap.core.label_object import LabelObject, LabelObjectLine
from labelmap.core.container import LabelObjectContainer
from labelmap.core.label_map import LabelMap

__all__ = ['LabelType', 'LabelObject', 'LabelObjectLine', 'LabelObjectContainer', 'LabelMap']
