"""패키지 예외 계층"""


class SkinAgeAnalyzerException(Exception):
    """skin_age_analyzer 에서 발생하는 모든 예외의 기반 클래스"""


class ConfigurationError(SkinAgeAnalyzerException):
    """설정 값이 허용 범위를 벗어났거나 MediaPipe 초기화 실패"""


class InvalidImageError(SkinAgeAnalyzerException):
    """프레임 / 이미지 / 비디오 입력을 읽을 수 없음"""


class DetectionError(SkinAgeAnalyzerException):
    """검출 결과를 랜드마크로 변환하는 중 실패"""


class LandmarkExtractionError(SkinAgeAnalyzerException):
    """MediaPipe 결과에 얼굴이 없음"""


class InvalidLandmarkSetError(SkinAgeAnalyzerException):
    """계산에 필요한 인덱스를 모두 포함하지 않는 랜드마크 세트"""
