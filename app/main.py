import uvicorn

from charity_events.application import create_app
from charity_events.config import HOST, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
