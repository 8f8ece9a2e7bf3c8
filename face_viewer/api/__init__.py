"""
API layer for the Face Viewer backend.

Exposes the read-only HTTP endpoints polled by the webview under /api
(latest photo descriptor, photo bytes, face detections).
"""
