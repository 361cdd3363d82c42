from app import create_app
from extensions import db
from models import User


def create_user(app, email, password):
    email = email.strip().lower()
    with app.app_context():
        # emails are unique
        existing_user = User.query.filter_by(email=email).first()
        if existing_user:
            print(f"User '{email}' already exists.")
            return None

        user = User(email=email, role="admin")
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        print(f"Created admin: {email}")
        return user


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create the admin account.')
    parser.add_argument('email', help='Admin e-mail (login)')
    parser.add_argument('password', help='Admin password')

    args = parser.parse_args()
    create_user(create_app(), args.email, args.password)
