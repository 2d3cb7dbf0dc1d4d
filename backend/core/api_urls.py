from django.urls import path
from . import views

urlpatterns = [
    path('projects', views.ProjectListView.as_view(), name='project-list'),
    path('projects/<str:pk>', views.ProjectDetailView.as_view(), name='project-detail'),
    path('skills', views.SkillListView.as_view(), name='skill-list'),
    path('skills/<str:pk>', views.SkillDetailView.as_view(), name='skill-detail'),
    path('experiences', views.ExperienceListView.as_view(), name='experience-list'),
    path('experiences/<str:pk>', views.ExperienceDetailView.as_view(), name='experience-detail'),
    path('messages', views.MessageListView.as_view(), name='message-list'),
    path('messages/<str:pk>', views.MessageDetailView.as_view(), name='message-detail'),
]
