import django_filters
from .models import CustomerNotification, OwnerNotification, NotificationStatus


class CustomerNotificationFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=NotificationStatus.choices)

    class Meta:
        model = CustomerNotification
        fields = ['status']


class OwnerNotificationFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=NotificationStatus.choices)
    restaurant = django_filters.NumberFilter(field_name='restaurant_id')

    class Meta:
        model = OwnerNotification
        fields = ['status', 'restaurant']
