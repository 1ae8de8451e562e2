"""主程序入口 - 交互式算术表达式计算器"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, CLI_CONFIG, COMPUTATION_MODES, UTILITY_TOOLS, validate_config
from calculator import ExpressionCalculator
from core import EvalError, Mode
from utils import format_menu, format_result

logger = logging.getLogger(__name__)


def _read_choice(mapping, retry_message):
    """循环读取菜单编号，直到输入合法；EOF 返回 None"""
    while True:
        try:
            line = input()
        except EOFError:
            return None
        line = line.strip()
        if line.isdigit() and int(line) in mapping:
            return int(line)
        print(retry_message)


def select_utility():
    print(CLI_CONFIG["welcome"])
    print(format_menu(UTILITY_TOOLS))
    choice = _read_choice(UTILITY_TOOLS, "Please select utility tools number from the mapping list")
    if choice is not None:
        print(f"You have select: {choice} {UTILITY_TOOLS[choice]}")
    return choice


def select_mode():
    print(CLI_CONFIG["mode_prompt"])
    print(format_menu(COMPUTATION_MODES))
    choice = _read_choice(COMPUTATION_MODES, "Please select valid computation mode from the mapping list")
    if choice is not None:
        print(f"You have selected: {choice} {COMPUTATION_MODES[choice]}")
    return choice


def print_trace(trace):
    print("User Input ", trace['input'])
    print("Validate User Input ", trace['validated'])
    print("Clean User Input ", trace['normalized'])
    if trace['postfix'] is not None:
        print("Postfix ", ' '.join(trace['postfix']))


def evaluate_line(calculator, line, trace=False):
    """计算一行输入并打印结果，返回是否成功"""
    if trace:
        print_trace(calculator.explain(line))
    try:
        result = calculator.evaluate(line)
    except EvalError as e:
        print(f"Error: {e.message}")
        return False
    print("Calculate results:", format_result(result, calculator.dtype))
    return True


def run_calculator(calculator, trace=False):
    """读取-求值循环，quit/exit 或 EOF 结束"""
    while True:
        try:
            line = input(CLI_CONFIG["expression_prompt"])
        except EOFError:
            print()
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in CLI_CONFIG["exit_commands"]:
            break
        evaluate_line(calculator, line, trace=trace)
    logger.info(f"Calculator session finished: {calculator.cache_info}")


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive arithmetic expression calculator")
    parser.add_argument('--mode', type=int, choices=sorted(COMPUTATION_MODES),
                        help='Computation mode: 1=Scientific, 2=Accounting')
    parser.add_argument('--expr', type=str, default=None,
                        help='Evaluate a single expression and exit')
    parser.add_argument('--trace', action='store_true',
                        help='Print every pipeline stage')
    parser.add_argument('--flat-accounting', action='store_true',
                        default=CALCULATOR_CONFIG['accounting_flat_precedence'],
                        help='Accounting mode gives every operator the same precedence')
    parser.add_argument('--dtype', choices=['float32', 'float64'],
                        default=CALCULATOR_CONFIG['numeric_dtype'],
                        help='Numeric type of the value stack')
    parser.add_argument('--log-level', default=CLI_CONFIG['log_level'],
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=CLI_CONFIG['log_format']
    )
    validate_config()

    mode = args.mode
    if args.expr is None and mode is None:
        if select_utility() is None:
            return 0
        mode = select_mode()
        if mode is None:
            return 0
    if mode is None:
        mode = CALCULATOR_CONFIG['default_mode']

    calculator = ExpressionCalculator(mode=Mode(mode), dtype=args.dtype,
                                      flat_accounting=args.flat_accounting)
    logger.info(f"Computation mode: {calculator.mode.name}, dtype: {args.dtype}")

    if args.expr is not None:
        return 0 if evaluate_line(calculator, args.expr, trace=args.trace) else 1

    run_calculator(calculator, trace=args.trace)
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
