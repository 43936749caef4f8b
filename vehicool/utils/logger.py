# vehicool/utils/logger.py
# ---------------------------------------------------------------
# Package logger + OpenGL error reporting.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("VehiCool")

logger = init_logger()

def gl_check_error(context: str = ""):
    """Check glGetError and log it when something went wrong."""
    from OpenGL import GL

    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        from OpenGL import GLU
        msg = GLU.gluErrorString(err).decode()
        logger.error(f"OpenGL error {msg} [{context}]")
