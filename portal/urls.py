# portal/urls.py
from django.urls import path
from . import views

app_name = "portal"

urlpatterns = [
    path('dashboard/', views.dashboard_redirect, name='dashboard'),
    path('dashboard/admin/', views.admin_dashboard, name='admin_dashboard'),
    path('dashboard/faculty/', views.faculty_dashboard, name='faculty_dashboard'),
    path('dashboard/student/', views.student_dashboard, name='student_dashboard'),
    path('unauthorized/', views.unauthorized, name='unauthorized'),

    path('dashboard/admin/notices/', views.admin_notices, name='admin_notices'),
    path('dashboard/faculty/notices/', views.faculty_notices, name='faculty_notices'),
    path('dashboard/student/notices/', views.student_notices, name='student_notices'),
    path('notices/create/', views.notice_create, name='notice_create'),
    path('notices/<uuid:notice_id>/', views.notice_detail, name='notice_detail'),
    path('notices/<uuid:notice_id>/update/', views.notice_update, name='notice_update'),
    path('notices/<uuid:notice_id>/delete/', views.notice_delete, name='notice_delete'),
    path('notices/<uuid:notice_id>/pdf/', views.notice_pdf, name='notice_pdf'),

    path('notifications/', views.notifications_page, name='notifications'),
    path('notifications/unread-count/', views.notifications_unread_count, name='notifications_unread_count'),
    path('notifications/<int:notification_id>/read/', views.notification_mark_read, name='notification_mark_read'),
    path('notifications/read-all/', views.notifications_mark_all_read, name='notifications_mark_all_read'),

    path('dashboard/admin/logs/', views.admin_logs, name='admin_logs'),
    path('', views.home, name='home'),
]
