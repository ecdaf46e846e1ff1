# adoptme/core/database.py
import logging
from typing import Optional
from flask import Flask
from pymongo import MongoClient, ASCENDING
from pymongo.collection import Collection

class MongoDatabase:
    """
    프로세스 전역에서 공유되는 MongoDB 연결.
    create_app에서 한 번 초기화되어 각 서비스에 주입되며, 종료 시 close()로 정리합니다.
    """
    def __init__(self):
        self.client: Optional[MongoClient] = None
        self.db = None

    def init_app(self, app: Flask, client: Optional[MongoClient] = None):
        """앱 초기화 과정에서 호출되어 DB 연결 및 인덱스를 설정합니다."""
        # 테스트에서는 mongomock.MongoClient가 주입됩니다.
        self.client = client or MongoClient(app.config['MONGO_URL'], tz_aware=True)
        self.db = self.client[app.config['MONGO_DB_NAME']]
        self.ensure_indexes()
        app.extensions['mongo'] = self
        logging.info(f"MongoDB connected (db: {app.config['MONGO_DB_NAME']})")

    def ensure_indexes(self):
        # 이메일 중복과 동일 반려동물의 이중 입양을 저장소 수준에서 차단합니다.
        self.collection('users').create_index([('email', ASCENDING)], unique=True)
        self.collection('adoptions').create_index([('pid', ASCENDING)], unique=True)

    def collection(self, name: str) -> Collection:
        if self.db is None:
            raise RuntimeError("MongoDatabase.init_app()이 호출되지 않았습니다.")
        return self.db[name]

    def close(self):
        if self.client is not None:
            self.client.close()
            logging.info("MongoDB connection closed")
        self.client = None
        self.db = None
