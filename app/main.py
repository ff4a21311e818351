import sys

from dotenv import load_dotenv

from app.adapters.internal.cli.main import main


def run() -> None:
    # 환경 변수 로드
    load_dotenv()
    sys.exit(main())


if __name__ == "__main__":
    run()
