"""피부 나이 스캐너 CLI (skin-age-scan)"""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .processing import FrameProcessor
from .utils import get_logger, set_config, setup_logging
from .utils.exceptions import SkinAgeAnalyzerException
from .utils.json_exporter import to_renderer_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='skin-age-scan',
        description='얼굴 기하 비율 기반 피부 나이 스캐너 (비의료용)'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--camera',
        type=int,
        default=None,
        help='카메라 디바이스 ID (기본: config.yaml 의 scanner.camera_id)'
    )
    source.add_argument('--video', help='분석할 비디오 파일')
    source.add_argument('--image', help='분석할 단일 이미지 파일')
    parser.add_argument(
        '--no-display',
        action='store_true',
        help='화면 표시 없이 처리'
    )
    parser.add_argument(
        '--max-frames',
        type=int,
        default=None,
        help='최대 처리 프레임 수'
    )
    parser.add_argument(
        '--output',
        default=None,
        help='렌더러 JSON 결과 저장 파일'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='설정 파일 경로 (기본: 패키지 내 config.yaml)'
    )
    return parser


def run(args: argparse.Namespace) -> List[Dict[str, Any]]:
    """선택된 입력 소스를 처리하고 렌더러 JSON 리스트 반환"""
    logger = get_logger(__name__)
    processor = FrameProcessor()
    display = not args.no_display

    payloads = []
    try:
        if args.image:
            results = [processor.process_image(args.image)]
        elif args.video:
            results = processor.process_video(args.video, display=display, max_frames=args.max_frames)
        else:
            results = processor.process_realtime(args.camera, display=display, max_frames=args.max_frames)

        for result in results:
            payload = to_renderer_json(result)
            payloads.append(payload)
            if result.face_detected:
                logger.debug(
                    f"age={payload['estimatedAge']} locked={payload['locked']} isChild={payload['isChild']}"
                )
    finally:
        processor.release()

    final = processor.stabilizer.locked_value
    if final is not None:
        logger.info(f"Final locked skin age: {final.estimated_age}")
    else:
        logger.info("Metrics were not locked (not enough face frames)")
    return payloads


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = build_parser().parse_args(argv)

    if args.config:
        set_config(args.config)
        setup_logging(force=True)

    logger = get_logger(__name__)

    try:
        payloads = run(args)
    except SkinAgeAnalyzerException as e:
        logger.error(f"Scan failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    if args.output:
        output_path = Path(args.output)
        with output_path.open('w', encoding='utf-8') as f:
            json.dump(payloads, f, indent=2, ensure_ascii=False)
        logger.info(f"Saved {len(payloads)} results to {output_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
