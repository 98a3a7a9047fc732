import sys

with_tb_sys_except_hook = sys.excepthook
sans_tb_sys_except_hook = lambda tp,ex,tb: print(str(ex)) if isinstance(ex, PcgExit) else with_tb_sys_except_hook(tp,ex,tb)

sys.excepthook = sans_tb_sys_except_hook

class PcgException(Exception):
    def _render_traceback_(self):
        # This is a special method used by Jupyter Notebook for writing tracebacks
        # By dummying it up we can prevent PcgException from writing tracebacks in Jupyter Notebook
        # https://ipython.readthedocs.io/en/stable/config/integrating.html
        return [str(self)]

class BoundError(PcgException, ValueError):
    """A bounded draw was requested over an empty (or unrepresentable) range.

    This signals a defect in the calling code. It is raised before any
    output is drawn so the generator state is left untouched.
    """

class PcgExit(BaseException):
    # By inheriting directly from BaseException we are able to avoid triggering common
    # exception handlers. This is how the SystemExit exception also works when calling `exit()`.

    def _render_traceback_(self):
        return [str(self)]
