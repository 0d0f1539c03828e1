from aws_cdk import (
    Stack,
    CfnOutput,
    aws_lambda as lambda_,
    aws_logs as logs,
    Duration
)
from constructs import Construct

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class HelloCdkStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, asset_dir: str = "lambda", **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)
        # イメージアセットのパス（既定はcdkを実行するアプリディレクトリ配下のlambda）
        self.asset_dir = asset_dir

        # ハンドラーのログレベル（cdk.json または -c log_level=DEBUG で上書き可能）
        log_level = str(self.node.try_get_context("log_level") or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log_level context value: {log_level} (expected one of {', '.join(LOG_LEVELS)})")

        # デプロイするLambda関数の設定（同一イメージをcmdで切り替え）
        functions_config = [
            {
                "id": "HelloFunction",
                "handler": "hello.lambda_handler",
                "output_name": "HelloFunctionName",
                "description": "固定レスポンスを返し、受信イベントをログ出力する関数"
            },
            {
                "id": "HelloQuietFunction",
                "handler": "hello_quiet.lambda_handler",
                "output_name": "HelloQuietFunctionName",
                "description": "固定レスポンスを返す関数（イベントはログ出力しない）"
            }
        ]

        self.functions = {}
        for config in functions_config:
            self.functions[config["id"]] = self._create_function(config, log_level)

    def _create_function(self, config, log_level):
        """設定に従ってLambda関数とロググループ、出力を作成"""

        function_id = config["id"]

        # ロググループ（保持期間1週間）
        log_group = logs.LogGroup(
            self, f"{function_id}LogGroup",
            retention=logs.RetentionDays.ONE_WEEK
        )

        # Lambda関数(Dockerイメージ使用)
        function = lambda_.DockerImageFunction(
            self, function_id,
            code=lambda_.DockerImageCode.from_image_asset(
                self.asset_dir,
                cmd=[config["handler"]]
            ),
            description=config["description"],
            timeout=Duration.seconds(10),
            memory_size=128,
            log_group=log_group,
            environment={
                "LOG_LEVEL": log_level
            }
        )

        # hello-invoke から呼び出すための関数名を出力
        CfnOutput(
            self, config["output_name"],
            value=function.function_name
        )
        print(f"Configured function: {function_id} ({config['handler']})")

        return function
