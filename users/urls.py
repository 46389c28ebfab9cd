from django.urls import path
from . import views

urlpatterns = [
    path("login/", views.login_view, name="login"),
    path("logout/", views.logout_view, name="logout"),

    path("admin/manage-users/", views.admin_manage_users, name="admin_manage_users"),
    path("admin/manage-users/<int:id>/toggle-active/", views.toggle_user_active, name="toggle_user_active"),
    path("admin/export-users-csv/", views.export_users_csv, name="export_users_csv"),
    path("admin/upload-users/", views.upload_users, name="upload_users"),
    path("admin/save-uploaded-users/", views.save_uploaded_users, name="save_uploaded_users"),
]
