from app.services.auth import login


class User:
    def __init__(self, name):
        self.name = name

    def sign_in(self, password):
        return login(self, password)
