from django.contrib.auth.base_user import BaseUserManager


class CustomUserManager( BaseUserManager ):
    """
    Email is the unique identifier for authentication instead of a
    username.  Blank emails are stored as NULL so that any number of
    email-less users can coexist under the unique constraint.
    """

    use_in_migrations = True

    def _create_user( self, email, password, **extra_fields ):
        email = self.normalize_email( email ).strip().lower() if email else None
        if not email:
            email = None
        user = self.model( email = email, **extra_fields )
        if password:
            user.set_password( password )
        else:
            user.set_unusable_password()
        user.save( using = self._db )
        return user

    def create_user( self, email = None, password = None, **extra_fields ):
        extra_fields.setdefault( 'is_staff', False )
        extra_fields.setdefault( 'is_superuser', False )
        return self._create_user( email, password, **extra_fields )

    def create_superuser( self, email, password, **extra_fields ):
        extra_fields.setdefault( 'is_staff', True )
        extra_fields.setdefault( 'is_superuser', True )
        extra_fields.setdefault( 'is_active', True )

        if extra_fields.get( 'is_staff' ) is not True:
            raise ValueError( 'Superuser must have is_staff=True.' )
        if extra_fields.get( 'is_superuser' ) is not True:
            raise ValueError( 'Superuser must have is_superuser=True.' )
        return self._create_user( email, password, **extra_fields )
