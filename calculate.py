import logging
import sys

from calculator import Calculator
from calculator.error.error import CompilerException

logger = logging.getLogger("calculate")

logging.basicConfig(level=logging.WARNING)

# Calculate the expressions passed as arguments,
# or the default examples if there are none
scripts = sys.argv[1:] or [
    "2+3*5",
    "1*2+3*5",
    "2*(3+(2*2))",
    "10-5-2",
]

calculator = Calculator()
for script in scripts:
    print("=" * 25)
    print(f"Calculating: {script}")
    print("=" * 25)
    try:
        result = calculator.execute(script)
    except CompilerException as e:
        logger.error("%s", e)
        continue

    print(f"{script} = {result}")
