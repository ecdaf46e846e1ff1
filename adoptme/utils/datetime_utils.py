# adoptme/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 날짜/시간 처리를 위한 유틸리티 모듈

이 모듈의 목적:
1. 모든 시간 관련 작업을 UTC 기준으로 표준화
2. MongoDB(BSON) 호환성 보장 (BSON에는 date 타입이 없음)
3. 저장된 datetime을 API 응답용 date로 되돌리기
"""

import logging
from datetime import datetime, date, timezone, time
from typing import Any, Optional
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """날짜/시간 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def today() -> date:
        """오늘 날짜(UTC)를 반환"""
        return datetime.now(timezone.utc).date()

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        날짜 문자열을 date 객체로 파싱

        지원 포맷:
        - 2024-01-15
        - 2024/01/15
        - 2024-01-15T10:30:00Z
        """
        if not date_string:
            raise ValueError("빈 문자열은 파싱할 수 없습니다")
        try:
            return dateutil_parser.parse(date_string).date()
        except (ValueError, OverflowError) as e:
            logger.error(f"날짜 문자열 파싱 실패: {date_string} - {e}")
            raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def for_mongo(obj: Any) -> Any:
        """
        MongoDB 저장을 위해 객체의 날짜/시간 필드를 변환

        변환 규칙:
        - date -> datetime (00:00:00 UTC)
        - timezone-naive datetime -> timezone-aware datetime (UTC)
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.for_mongo(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.for_mongo(item) for item in obj]
        return obj

    @staticmethod
    def to_date(value: Any) -> Optional[date]:
        """
        DB에서 읽은 값을 date로 정규화합니다.
        datetime, date, 문자열을 모두 받아들이며 None은 그대로 둡니다.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return DateTimeUtils.parse_date_string(value)
        raise ValueError(f"date로 변환할 수 없는 값입니다: {value!r}")
