"""主程序入口 - 交互式REPL、单表达式求值和批量求值"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, REPL_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config
from core import convert, RPNEvaluator, ParseError, format_tokens
from batch import ExpressionEvaluator
from data.expression_loader import load_expressions

logger = logging.getLogger(__name__)


def evaluate_and_print(expression, allow_partial=True, out=None):
    """
    求值并打印RPN和结果，返回是否成功。
    转换错误直接打印错误信息，求值错误加 "Error: " 前缀。
    """
    if out is None:
        out = sys.stdout
    try:
        tokens = convert(expression)
    except ParseError as e:
        print(e, file=out)
        return False
    print(f"RPN Notation: {format_tokens(tokens, CALCULATOR_CONFIG['token_separator'])}", file=out)

    try:
        result = RPNEvaluator.evaluate(tokens, allow_partial=allow_partial)
    except ParseError as e:
        print(f"Error: {e}", file=out)
        return False
    print(f"Result: {result}", file=out)
    return True


def run_repl(allow_partial=True):
    """逐行读取表达式并打印结果，EOF 或 quit/exit 时退出"""
    logger.info("Starting REPL")
    while True:
        try:
            line = input(REPL_CONFIG['prompt'])
        except EOFError:
            print()
            break

        if line.strip() in REPL_CONFIG['exit_commands']:
            break
        evaluate_and_print(line, allow_partial=allow_partial)


def run_batch(args, allow_partial=True):
    expressions = load_expressions(args.input_path, args.column)
    evaluator = ExpressionEvaluator(allow_partial=allow_partial)
    results = evaluator.evaluate_many(expressions)

    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        results.to_csv(args.output_path, index=False)
    else:
        print(results.to_string(index=False))
    return 0


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    allow_partial = CALCULATOR_CONFIG['allow_partial'] and not args.strict

    if args.input_path:
        return run_batch(args, allow_partial=allow_partial)

    if args.expression is not None:
        return 0 if evaluate_and_print(args.expression, allow_partial=allow_partial) else 1

    run_repl(allow_partial=allow_partial)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix calculator using Reverse Polish Notation")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single infix expression and exit"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a CSV or text file of expressions to evaluate in batch"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column in a CSV input"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results as CSV (printed if omitted)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject expressions that leave more than one value on the stack"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    return main(build_parser().parse_args())


if __name__ == "__main__":
    sys.exit(cli())
