"""얼굴 랜드마크 인덱스 및 피부 지표 상수 정의"""

from typing import Dict, Tuple

# MediaPipe FaceMesh 인덱스 (정규화 좌표, 해상도 무관)
# 검출기와의 계약이므로 번호를 바꾸지 말 것
FACE_LANDMARKS: Dict[str, int] = {
    'forehead': 10,            # 이마 상단
    'forehead_reference': 151, # 이마 기준점 (미간 위)
    'chin': 152,               # 턱 끝
    'jaw_left': 172,           # 턱선 왼쪽
    'jaw_right': 397,          # 턱선 오른쪽
    'eye_left': 33,            # 왼쪽 눈꼬리
    'eye_right': 263,          # 오른쪽 눈꼬리
    'eye_top': 159,            # 윗눈꺼풀 중앙
    'eye_bottom': 145,         # 아랫눈꺼풀 중앙
    'face_left': 234,          # 얼굴 왼쪽 끝 (광대)
    'face_right': 454,         # 얼굴 오른쪽 끝 (광대)
    'nose_tip': 4,             # 코끝
    'nose_bridge': 6,          # 콧대 상단
    'lip_upper': 13,           # 윗입술 안쪽
    'lip_lower': 14,           # 아랫입술 안쪽
    'brow': 66,                # 눈썹
}

# 이마 라인 6개 포인트 (주름 점수)
FOREHEAD_RING: Tuple[int, ...] = (10, 338, 297, 332, 284, 251)

REQUIRED_LANDMARK_COUNT = max(max(FACE_LANDMARKS.values()), max(FOREHEAD_RING)) + 1

# 아이/성인 판별 게이트 (가중치 합 = 1.0)
CHILD_GATE = {
    'eye_ratio_threshold': 0.28,
    'eye_ratio_weight': 0.3,
    'chin_ratio_threshold': 0.18,
    'chin_ratio_weight': 0.3,
    'jaw_angle_threshold_deg': 140.0,
    'jaw_angle_weight': 0.2,
    'wrinkle_score_threshold': 0.05,
    'wrinkle_score_weight': 0.2,
    'child_threshold': 0.6,
}

CHILD_AGE = {
    'min': 3,
    'max': 9,
    'base': 4,
    'height_factor': 6,
    # 세부 지표 보간 구간 (3~14세)
    'range_start': 3,
    'range_span': 11,
}

ADULT_AGE = {
    'min': 20,
    'max': 55,
    'span': 35,
    'adjustment_limit': 5,
    'youth_pivot': 1.5,
    'youth_gain': 3,
}

# face signature 가중치 (AdultGeometryRatios 필드 순서)
SIGNATURE_WEIGHTS: Tuple[Tuple[str, float], ...] = (
    ('face_height_ratio', 1000),
    ('eye_distance_ratio', 800),
    ('forehead_ratio', 600),
    ('jaw_ratio', 500),
    ('nose_ratio', 400),
    ('eye_openness_ratio', 300),
    ('lip_ratio', 200),
    ('brow_ratio', 100),
)

# 성인 세부 지표 clamp 범위 (min, max)
ADULT_METRIC_BOUNDS: Dict[str, Tuple[int, int]] = {
    'wrinkles': (5, 75),
    'eye_aging': (3, 60),
    'texture': (60, 98),
    'volume': (55, 98),
    'skin_tone': (3, 25),
}

# 아이 세부 지표 범위 (texture / volume 은 하한만 존재)
CHILD_METRIC_BOUNDS: Dict[str, Tuple[int, int]] = {
    'wrinkles': (5, 20),
    'eye_aging': (3, 15),
    'texture': (85, 98),
    'volume': (88, 95),
    'skin_tone': (3, 12),
}

# 오버레이 주석 포인트 (인덱스, 라벨, 지표)
ANNOTATION_POINTS: Dict[str, Tuple[int, str, str]] = {
    'forehead': (10, 'Forehead', 'wrinkles'),
    'right_eye': (33, 'Around eyes', 'eye_aging'),
    'right_cheek': (234, 'Cheek', 'texture'),
    'jawline': (172, 'Jawline', 'volume'),
    'nose': (4, 'Skin tone', 'skin_tone'),
}

# 얼굴 오른쪽 절반 윤곽 (오버레이용)
RIGHT_FACE_CONTOUR: Tuple[int, ...] = (
    10, 338, 297, 332, 284, 251, 389, 356, 454, 323, 361, 288,
    397, 365, 379, 378, 400, 377, 152,
)
