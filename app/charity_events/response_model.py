def MessageResponseModel(message: str, **data):
    return {"message": message, **data}


def ErrorResponseModel(error: str, **detail):
    return {"error": error, **detail}


def model_to_dict(instance):
    return {column.name: getattr(instance, column.name) for column in instance.__table__.columns}
