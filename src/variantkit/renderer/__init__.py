from variantkit.renderer.base import Renderer
from variantkit.renderer.recording import RecordingRenderer, RenderCall

__all__ = ["Renderer", "RecordingRenderer", "RenderCall"]
