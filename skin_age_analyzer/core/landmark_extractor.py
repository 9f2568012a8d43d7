"""MediaPipe 출력 → Landmark 변환"""

from typing import List, Sequence, Tuple

from ..models import Landmark
from ..utils.exceptions import LandmarkExtractionError


class LandmarkExtractor:
    """FaceMesh 결과의 첫 번째 얼굴을 Landmark 리스트로 변환"""

    def extract_landmarks(self, face_mesh_output, frame_width: int, frame_height: int) -> List[Landmark]:
        """
        Args:
            face_mesh_output: FaceMesh.process() 반환값 (multi_face_landmarks 속성)
            frame_width, frame_height: 픽셀 좌표 계산용 프레임 크기

        Returns:
            정규화 좌표 + 픽셀 좌표를 가진 Landmark 리스트
            (refine_landmarks=True 이면 478개)

        Raises:
            LandmarkExtractionError: 얼굴이 하나도 없는 경우
        """
        faces = getattr(face_mesh_output, 'multi_face_landmarks', None)
        if not faces:
            raise LandmarkExtractionError("FaceMesh output contains no face")

        return [
            Landmark(
                x=point.x,
                y=point.y,
                z=point.z,
                visibility=getattr(point, 'visibility', 1.0),
                pixel_x=int(point.x * frame_width),
                pixel_y=int(point.y * frame_height),
            )
            for point in faces[0].landmark
        ]

    @staticmethod
    def get_bounding_box(landmarks: Sequence[Landmark]) -> Tuple[int, int, int, int]:
        """픽셀 좌표의 (x, y, w, h). 픽셀 좌표가 없으면 (0, 0, 0, 0)"""
        pixels = [(lm.pixel_x, lm.pixel_y) for lm in landmarks
                  if lm.pixel_x is not None and lm.pixel_y is not None]
        if not pixels:
            return (0, 0, 0, 0)

        xs, ys = zip(*pixels)
        return (min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
