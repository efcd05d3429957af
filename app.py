import dotenv

dotenv.load_dotenv()

from shiny import App  # noqa: E402

from onerepmax.server import server  # noqa: E402
from onerepmax.ui import app_ui  # noqa: E402

app = App(app_ui, server)
