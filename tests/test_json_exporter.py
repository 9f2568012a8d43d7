"""Tests for renderer JSON export."""

import json

from skin_age_analyzer.models import FrameResult
from skin_age_analyzer.processing.frame_processor import FrameProcessor
from skin_age_analyzer.processing.stabilizer import MetricsStabilizer
from skin_age_analyzer.utils.json_exporter import to_renderer_json


def test_face_result_payload(child_landmarks):
    processor = FrameProcessor(detector=object(), stabilizer=MetricsStabilizer())
    result = processor.process_landmarks(child_landmarks)
    result.metadata['frame_number'] = 3

    payload = to_renderer_json(result)

    assert payload['faceDetected'] is True
    assert payload['isChild'] is True
    assert payload['locked'] is False
    assert payload['estimatedAge'] == 9
    assert payload['eyeAging'] == result.metrics.eye_aging
    assert payload['skinTone'] == result.metrics.skin_tone
    assert payload['frameNumber'] == 3
    assert isinstance(payload['timestamp'], float)
    json.dumps(payload)


def test_no_face_payload():
    payload = to_renderer_json(FrameResult(face_detected=False, no_face_hint=True))
    assert payload['faceDetected'] is False
    assert payload['noFaceHint'] is True
    assert payload['isChild'] is None
    assert payload['estimatedAge'] is None
    assert payload['wrinkles'] is None
    assert 'frameNumber' not in payload
