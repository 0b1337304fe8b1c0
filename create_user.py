from app import create_app
from extensions import get_storage
from models import ROLES
from stores import FailureKind


def create_user(app, username, password, role, membership_end_date=None):
    with app.app_context():
        result = get_storage().users.create(username, password, role, membership_end_date)
        if result:
            print(f"✅ Created user: {username} (role: {role})")
        elif result.error is FailureKind.DUPLICATE_KEY:
            print(f"⚠️  User '{username}' already exists.")
        else:
            print(f"❌ Could not create user '{username}': {result.message}")
        return result


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')
    parser.add_argument('role', choices=ROLES, help='User role')
    parser.add_argument('--membership-end', dest='membership_end_date',
                        help='Membership end date (members only)')

    args = parser.parse_args()
    end_date = args.membership_end_date if args.role == 'user' else None
    outcome = create_user(create_app(), args.username, args.password, args.role, end_date)
    raise SystemExit(0 if outcome else 1)
