from app import create_app
from extensions import db
from models import User
from werkzeug.security import generate_password_hash


def create_user(username, password, role, reset_password=False):
    app = create_app()
    with app.app_context():
        existing_user = User.query.filter_by(username=username).first()
        if existing_user:
            if not reset_password:
                print(f"⚠️  User '{username}' already exists with role '{existing_user.role}'.")
                return
            existing_user.password = generate_password_hash(password)
            existing_user.role = role
            db.session.commit()
            print(f"✅ Updated user: {username} (role: {role})")
            return

        user = User(
            username=username,
            password=generate_password_hash(password),
            role=role
        )
        db.session.add(user)
        db.session.commit()
        print(f"✅ Created user: {username} (role: {role})")

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create an API user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')
    parser.add_argument('role', choices=['root', 'admin', 'user'], help='User role')
    parser.add_argument('--reset-password', action='store_true',
                        help='overwrite password and role of an existing user')

    args = parser.parse_args()
    create_user(args.username, args.password, args.role, args.reset_password)
