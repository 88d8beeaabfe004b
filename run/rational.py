import sys

from MathObjects.Number.Rational import Rational
from MathObjects.Logger import Logger
from MathObjects import Exceptions


if __name__ == '__main__':
	with Logger(sys.stdout) as logger:
		for string in (sys.argv[1:] or ['13 3/8', '-6/5', '2 16/8', '-10 18/16', '-10 -18']):
			try:
				rational: Rational = Rational.from_string(string)
				logger.info(f'\'{string}\' -> {rational} = {float(rational)}')
			except Exceptions.RationalException as err:
				logger.error(err)

		for number in (0.1, -1.1, 15.3333333, 0.116116116):
			logger.info(f'{number} ~ {Rational.from_float(number)}')
