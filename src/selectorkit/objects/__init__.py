from selectorkit.objects.codec import from_json, to_json
from selectorkit.objects.rectangle import Rectangle

__all__ = ["Rectangle", "from_json", "to_json"]
