import sys

from calculadora.main import main

sys.exit(main())
