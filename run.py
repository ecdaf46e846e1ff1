# run.py
import atexit
import os
from dotenv import load_dotenv
basedir = os.path.abspath(os.path.dirname(__file__))
# 이 파일과 같은 디렉터리의 '.env' 파일을 명시적으로 로드합니다.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from adoptme import create_app

app = create_app()
# 프로세스 종료 시 MongoDB 연결을 정리합니다.
atexit.register(app.services['db'].close)

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    port = app.config['PORT']
    debug = app.config.get('DEBUG', False)
    app.run(host=host, port=port, debug=debug)
