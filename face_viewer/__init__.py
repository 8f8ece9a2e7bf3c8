"""
Face Viewer Backend root package.

Caches photos taken by smart glasses, runs hosted face detection on each
photo, and serves the newest photo and its detections to a polling webview.
"""
