import logging
import sys

from code_optimizer.core.config import get_settings
from code_optimizer.services.optimizer_service import CodeOptimizerService

SAMPLE_CODE = """
function sumArray(arr) {
  let total = 0;
  for(let i = 0; i < arr.length; i++) {
    total += arr[i];
  }
  return total;
}
"""


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if argv:
        try:
            with open(argv[0], "r", encoding="utf-8") as f:
                code = f.read()
        except OSError as e:
            print("Error:", e)
            return 2
    else:
        code = SAMPLE_CODE

    result = CodeOptimizerService(settings).optimize(code)

    if result.succeeded:
        print("Optimized code:\n", result.optimized_code)
        return 0

    print("Error:", result.error_message)
    print("\n--- Original code (unchanged) ---")
    print(result.optimized_code)
    return 1


if __name__ == "__main__":
    sys.exit(main())
