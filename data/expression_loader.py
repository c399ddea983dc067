"""表达式加载模块"""
import logging

import pandas as pd

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=BATCH_CONFIG["expression_column"]):
    """
    加载待求值的表达式列表。

    Parameters:
    - file_path: CSV文件（按列读取）或纯文本文件（每行一个表达式）
    - column: CSV中表达式所在的列名, 默认为 'expression'

    Returns:
    - 表达式字符串列表（跳过空行）
    """
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 表达式必须按字符串读取，避免 "3" 之类被转换成数字
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = df[column].tolist()
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = f.read().splitlines()

    expressions = [e for e in expressions if e.strip()]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions
