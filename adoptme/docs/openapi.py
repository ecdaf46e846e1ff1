# adoptme/docs/openapi.py
"""
리소스별 OpenAPI YAML 조각(docs/paths/*.yaml)을 하나의 OpenAPI 문서로 병합합니다.
앱 시작 시 한 번만 빌드되며 이후에는 읽기 전용입니다.
"""
import glob
import logging
import os
from typing import Any, Dict, Optional

import yaml

PATHS_DIR = os.path.join(os.path.dirname(__file__), 'paths')

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, encoding='utf-8') as f:
        return yaml.safe_load(f) or {}

def merge_openapi(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    """extra를 base에 재귀적으로 병합합니다. 같은 키의 dict는 합치고 나머지는 덮어씁니다."""
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_openapi(base[key], value)
        else:
            base[key] = value
    return base

def build_openapi_spec(title: str, description: str, version: str, fragments_dir: Optional[str] = None) -> Dict[str, Any]:
    document: Dict[str, Any] = {
        "openapi": "3.0.1",
        "info": {"title": title, "description": description, "version": version},
        "paths": {},
        "components": {"schemas": {}},
    }
    for path in sorted(glob.glob(os.path.join(fragments_dir or PATHS_DIR, '**', '*.yaml'), recursive=True)):
        merge_openapi(document, load_yaml(path))
        logging.debug(f"Merged {os.path.basename(path)} into OpenAPI")
    logging.info(f"OpenAPI document built with {len(document['paths'])} paths")
    return document
