"""
분석 결과를 렌더러(UI)용 JSON 으로 변환
"""
from typing import Any, Dict

from ..models import FrameResult

# SkinMetrics 필드 → 렌더러 키 (camelCase)
RENDERER_KEYS = {
    'wrinkles': 'wrinkles',
    'texture': 'texture',
    'volume': 'volume',
    'eye_aging': 'eyeAging',
    'skin_tone': 'skinTone',
    'estimated_age': 'estimatedAge',
}


def to_renderer_json(result: FrameResult) -> Dict[str, Any]:
    """
    FrameResult 를 렌더러에서 사용할 JSON 으로 변환
    - 지표: 안정화된 값 (얼굴 미검출이면 null)
    - isChild: 아이 분기 여부 (얼굴 미검출이면 null)

    Args:
        result: FrameProcessor 처리 결과

    Returns:
        dict: JSON 직렬화 가능한 딕셔너리
    """
    payload: Dict[str, Any] = {
        'faceDetected': result.face_detected,
        'locked': result.locked,
        'noFaceHint': result.no_face_hint,
        'isChild': result.analysis.is_child if result.analysis else None,
        'timestamp': result.metadata.get('timestamp'),
    }

    if 'frame_number' in result.metadata:
        payload['frameNumber'] = result.metadata['frame_number']

    metrics = result.metrics.to_dict() if result.metrics else {}
    for field_name, key in RENDERER_KEYS.items():
        payload[key] = metrics.get(field_name)

    return payload
