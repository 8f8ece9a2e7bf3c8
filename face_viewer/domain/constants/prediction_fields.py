"""Constants for face detection API field names"""


class PredictionFields:
    """Field name constants for the hosted model's prediction payload"""
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"
    CONFIDENCE = "confidence"
    CLASS = "class"
    CLASS_ID = "class_id"
    DETECTION_ID = "detection_id"
