"""
設定管理モジュール

関連クラス:
  - server.run: ServerConfigでuvicornを起動
  - server.dependencies: 起動時にロガーを設定
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_PORT = 3000


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass
class Config:
    """アプリケーション設定クラス"""

    # サーバー設定
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/todo_service.log"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.server is None:
            self.server = ServerConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        環境変数（PORT, HOST, LOG_LEVEL, LOG_FILE）はYAMLの値より優先する。

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス
        """
        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "app_config.yaml"

        yaml_data: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        log_data = yaml_data.get("log", {})

        return cls(
            server=ServerConfig(
                host=os.getenv("HOST", server_data.get("host", "0.0.0.0")),
                port=int(os.getenv("PORT", server_data.get("port", DEFAULT_PORT))),
            ),
            log_level=os.getenv("LOG_LEVEL", log_data.get("level", "INFO")),
            log_file=os.getenv("LOG_FILE", log_data.get("file", "logs/todo_service.log")),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数のみから設定を読み込む"""
        return cls(
            server=ServerConfig(
                host=os.getenv("HOST", "0.0.0.0"),
                port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/todo_service.log"),
        )
