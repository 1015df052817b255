from html2wf.mapping.base import ElementMapper
from html2wf.mapping.dict_mapper import DictElementMapper, preset_id, style_property_name

__all__ = ["ElementMapper", "DictElementMapper", "preset_id", "style_property_name"]
