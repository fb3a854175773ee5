# CI/CD 파이프라인 데모용 웹앱
# 빌드 -> 컨테이너화 -> JFrog 아티팩트 게시 -> Kubernetes 배포 확인용 Flask 서버
import logging
import os
import sys
import time
from datetime import datetime

from flask import Flask, g, jsonify, request

APP_VERSION = '1.0.0'
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8080

app = Flask(__name__)
# 응답 JSON 키 순서를 작성 순서대로 유지
app.json.sort_keys = False


@app.before_request
def start_timer():
    """요청 시작 시각을 기록하여 응답 지연을 산출"""
    g.request_start_time = time.time()


@app.after_request
def log_request(response):
    """요청 한 건당 한 줄 로그 (메서드, 경로, 상태 코드, 소요 시간)"""
    elapsed = time.time() - getattr(g, 'request_start_time', time.time())
    app.logger.info(
        '%s %s -> %s (%.1fms)',
        request.method, request.path, response.status_code, elapsed * 1000
    )
    return response


# 메인 페이지 - 환영 메시지와 버전
@app.route('/')
def home():
    return jsonify({
        'message': 'Welcome to DevOps CI/CD Pipeline with JFrog!',
        'timestamp': datetime.now().isoformat(),
        'version': APP_VERSION
    })


# 헬스체크 엔드포인트 - Kubernetes liveness probe용 (항상 UP)
@app.route('/health')
def health():
    return jsonify({
        'status': 'UP',
        'application': 'DevOps Demo App'
    })


# 파이프라인 구성 정보
@app.route('/info')
def info():
    return jsonify({
        'app': 'DevOps Demo Application',
        'tools': 'GitHub, Jenkins, Docker, JFrog, Kubernetes',
        'description': 'Complete CI/CD Pipeline Demo'
    })


def main():
    """환경변수로 설정을 읽고 서버 기동. 실패 시 0이 아닌 종료 코드 반환"""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
    if not isinstance(logging.getLevelName(log_level), int):
        app.logger.error('LOG_LEVEL 값이 올바르지 않습니다: %r', log_level)
        return 1
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    host = os.getenv('HOST', DEFAULT_HOST)
    raw_port = os.getenv('PORT', str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        app.logger.error('PORT 값이 정수가 아닙니다: %r', raw_port)
        return 1
    if not 0 < port < 65536:
        app.logger.error('PORT 값이 범위를 벗어났습니다: %d', port)
        return 1

    app.logger.info('DevOps Demo App %s 시작: http://%s:%d', APP_VERSION, host, port)
    app.logger.info('API 엔드포인트: GET /, GET /health, GET /info')

    try:
        app.run(host=host, port=port)
    except SystemExit as e:
        # werkzeug 는 바인딩 실패 시 stderr 출력 후 sys.exit(1)
        app.logger.error('포트 %d 바인딩 실패 (exit %s)', port, e.code)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
