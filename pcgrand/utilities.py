import sys
import warnings
import importlib.util

from pcgrand.exceptions import PcgExit

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

# Python ints never overflow, so every word we keep must be
# clipped back to its width after arithmetic.
def wrap(value:int, bits:int = 32) -> int:
    """Clip an integer to an unsigned word of the given width."""
    return value & ((1 << bits) - 1)

def saturating_len_as_u32(length:int) -> int:
    """Convert a container length to a u32 index bound.

    Remarks:
        On interpreters whose native size is wider than 32 bits lengths
        past `U32_MAX` saturate to `U32_MAX`, so the tail of a larger
        sequence can never be picked. On narrower interpreters every
        length already fits and is passed through unchanged.
    """
    if sys.maxsize > U32_MAX:
        return length if length <= U32_MAX else U32_MAX
    return length

def pcg_exit(message:str):
    #we ignore warnings before exiting in order to make jupyter's output a little cleaner
    warnings.filterwarnings("ignore",message="To exit: use 'exit', 'quit', or Ctrl-D.")
    raise PcgExit(message) from None

class PackageChecker:
    @staticmethod
    def scipy(caller_name:str = None, strict:bool = True) -> None:
        """Raise ImportError with detailed error message if scipy is not installed.

        Functionality requiring scipy should call this helper and then lazily import.

        Args:
            caller_name: The name of the caller that requires scipy.
        """
        return PackageChecker._check(caller_name, "scipy", strict=strict)

    def _check(caller_name:str, module_name:str, pkg_name:str = None, strict:bool = True):
        """
        Remarks:
            This pattern borrows heavily from sklearn. As of 6/20/2020 sklearn code could be found
            at https://github.com/scikit-learn/scikit-learn/blob/master/sklearn/utils/__init__.py
        """

        try:
            #if there are submodules a ModuleNotFoundError can be produced
            module_found = importlib.util.find_spec(module_name) is not None
        except ModuleNotFoundError:
            module_found = False

        if module_found:
            return True
        elif strict:
            pkg_name = pkg_name or module_name
            pcg_exit(f"ERROR: {caller_name} requires the {pkg_name} package. You can install this package via `pip install {pkg_name}`.")
        else:
            return False
