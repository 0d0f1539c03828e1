#!/usr/bin/env python3
import os

import aws_cdk as cdk

from hello_cdk.hello_cdk_stack import HelloCdkStack


app = cdk.App()

# スタック名は -c stack_name=... で切り替え可能
stack_name = app.node.try_get_context("stack_name") or "HelloCdkStack"

HelloCdkStack(app, stack_name,
    description="Hello from Lambda サンプル関数（echo / quiet の2種類）",
    # このスタックは現在のCLI設定のアカウント/リージョンにデプロイされます
    env=cdk.Environment(account=os.getenv('CDK_DEFAULT_ACCOUNT'), region=os.getenv('CDK_DEFAULT_REGION')),
)

# 全リソースにプロジェクトタグを付与
cdk.Tags.of(app).add("project", "hello-lambda")

app.synth()
