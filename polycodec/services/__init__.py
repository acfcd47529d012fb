from polycodec.services.encoder import PolylineEncoder, encode
from polycodec.services.simplifier import SimplificationResult, simplify
from .polyline import polyline_service

__all__ = ["PolylineEncoder", "encode", "SimplificationResult", "simplify", "polyline_service"]
